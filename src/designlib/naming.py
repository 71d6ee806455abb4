"""Name normalization shared by every discovery strategy."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[-_\s]+")
_WORD_START = re.compile(r"\b\w")
_NON_SLUG = re.compile(r"[^a-z0-9]+")


def normalize_name(name: str) -> str:
    """Dedup key: case-folded with ``-``, ``_`` and whitespace removed.

    ``"Date Picker"``, ``"date-picker"`` and ``"DatePicker"`` share a key.
    """
    return _SEPARATORS.sub("", name.casefold())


def title_case(raw: str) -> str:
    """``"radio-group"`` -> ``"Radio Group"``; existing capitals are kept."""
    spaced = _SEPARATORS.sub(" ", raw).strip()
    return _WORD_START.sub(lambda m: m.group(0).upper(), spaced)


def slugify(name: str) -> str:
    return _NON_SLUG.sub("-", name.casefold()).strip("-")


def unique_id(base: str, taken: set[str]) -> str:
    """``base``, or ``base-2``, ``base-3``... if already in ``taken``. Records the result."""
    candidate = base
    n = 2
    while candidate in taken:
        candidate = f"{base}-{n}"
        n += 1
    taken.add(candidate)
    return candidate
