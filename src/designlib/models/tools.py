from __future__ import annotations

from pydantic import BaseModel, field_validator


class ResolveLibraryInput(BaseModel):
    identifier: str
    canonical_name: str | None = None

    @field_validator("identifier")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("identifier must not be empty")
        if len(v) > 2048:
            raise ValueError("identifier must not exceed 2048 characters")
        return v

    @field_validator("canonical_name")
    @classmethod
    def validate_canonical_name(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None
