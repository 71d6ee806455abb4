"""Local records for the GitHub and Figma REST payloads.

Only the fields the scanners read are declared; everything else in the
response is ignored. A payload of the wrong shape raises
``pydantic.ValidationError``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# GitHub
# ---------------------------------------------------------------------------


class GitHubRepo(BaseModel):
    name: str | None = None
    description: str | None = None
    default_branch: str | None = None


class GitHubTreeItem(BaseModel):
    path: str
    type: Literal["blob", "tree", "commit"]


class GitHubTree(BaseModel):
    tree: list[GitHubTreeItem] = []
    truncated: bool = False


# ---------------------------------------------------------------------------
# Figma
# ---------------------------------------------------------------------------


class FigmaComponentMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    description: str = ""
    component_set_id: str | None = Field(default=None, alias="componentSetId")


class FigmaNode(BaseModel):
    id: str = ""
    name: str = ""
    type: str = ""
    children: list[FigmaNode] = []


class FigmaFile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    components: dict[str, FigmaComponentMeta] = {}
    component_sets: dict[str, FigmaComponentMeta] = Field(default={}, alias="componentSets")
    document: FigmaNode | None = None
