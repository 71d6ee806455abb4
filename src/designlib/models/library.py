from __future__ import annotations

import uuid
from enum import StrEnum

from pydantic import BaseModel, Field


class LibrarySource(StrEnum):
    CURATED = "curated"
    GITHUB = "github"
    FIGMA = "figma"
    HTML = "html-derived"  # Scraped from an arbitrary page


class ResolveStatus(StrEnum):
    RESOLVING = "resolving"
    RESOLVED = "resolved"
    ERROR = "error"


def new_library_id() -> str:
    return f"lib-{uuid.uuid4().hex[:12]}"


class LibraryComponent(BaseModel):
    """One named, categorized entry within a DesignLibrary."""

    id: str  # Unique within the owning library
    name: str
    category: str
    description: str


class DesignLibrary(BaseModel):
    """Resolved catalog describing one external design system's components."""

    id: str = Field(default_factory=new_library_id)
    name: str
    description: str
    source: LibrarySource
    source_url: str
    components: list[LibraryComponent]
    active: bool = True
