from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, field_validator

from designlib.models.library import LibraryComponent, LibrarySource


class RegistryEntry(BaseModel):
    """Single curated design system, matched by URL pattern."""

    model_config = ConfigDict(frozen=True)

    patterns: tuple[re.Pattern[str], ...]
    name: str
    description: str
    source: LibrarySource = LibrarySource.CURATED
    source_url: str
    components: tuple[LibraryComponent, ...]

    @field_validator("patterns", mode="before")
    @classmethod
    def compile_patterns(cls, v: object) -> tuple[re.Pattern[str], ...]:
        if not isinstance(v, (list, tuple)) or not v:
            raise ValueError("patterns must be a non-empty sequence")
        return tuple(p if isinstance(p, re.Pattern) else re.compile(p, re.IGNORECASE) for p in v)

    @field_validator("components")
    @classmethod
    def validate_unique_ids(
        cls, v: tuple[LibraryComponent, ...]
    ) -> tuple[LibraryComponent, ...]:
        ids = [c.id for c in v]
        if len(ids) != len(set(ids)):
            raise ValueError("component ids must be unique within an entry")
        if not v:
            raise ValueError("curated entries must list at least one component")
        return v


class BuiltInEntry(BaseModel):
    """Summary of a curated entry, for selection panels."""

    name: str
    description: str
    source: LibrarySource
    source_url: str
    component_count: int
