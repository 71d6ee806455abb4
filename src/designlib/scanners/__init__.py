from __future__ import annotations

from designlib.scanners.figma import scan_figma
from designlib.scanners.github import scan_github
from designlib.scanners.html import scan_html

__all__ = ["scan_figma", "scan_github", "scan_html"]
