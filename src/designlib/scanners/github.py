"""GitHub repository scanner.

Fetches the whole recursive tree in one request and treats every surviving
``.tsx``/``.jsx``/``.vue``/``.svelte`` file as one component.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

import structlog
from pydantic import ValidationError

from designlib.errors import DesignLibError
from designlib.models.library import DesignLibrary, LibraryComponent, LibrarySource
from designlib.models.remote import GitHubRepo, GitHubTree, GitHubTreeItem
from designlib.naming import normalize_name, slugify, title_case, unique_id

if TYPE_CHECKING:
    from designlib.config import Settings
    from designlib.fetcher import Fetcher

log = structlog.get_logger()

_REPO_URL = re.compile(r"github\.com/([^/\s?#]+)/([^/\s?#]+)", re.IGNORECASE)
_COMPONENT_EXTENSION = re.compile(r"\.(tsx|jsx|vue|svelte)$", re.IGNORECASE)
_IGNORED_FILENAME = re.compile(
    r"(\.(test|spec|stories|story)\.[a-z]+$)|(\.d\.ts$)|(^index\.[a-z]+$)", re.IGNORECASE
)
_IGNORED_DIRS = frozenset(
    {
        "node_modules",
        "dist",
        "build",
        "out",
        "coverage",
        "vendor",
        "__tests__",
        "__mocks__",
        "test",
        "tests",
        "stories",
        "utils",
        "helpers",
        "types",
        "constants",
        "hooks",
        "context",
    }
)
_GENERIC_DIRS = frozenset({"src", "lib", "components", "packages"})
_DEFAULT_CATEGORY = "Components"


def parse_repo(url: str) -> tuple[str, str] | None:
    """``(owner, repo)`` from a GitHub URL, or None if there is no such path."""
    match = _REPO_URL.search(url)
    if match is None:
        return None
    owner, repo = match.groups()
    repo = re.sub(r"\.git$", "", repo, flags=re.IGNORECASE)
    if not repo:
        return None
    return owner, repo


def is_component_file(item: GitHubTreeItem) -> bool:
    if item.type != "blob" or not _COMPONENT_EXTENSION.search(item.path):
        return False
    *dirs, filename = item.path.split("/")
    if _IGNORED_FILENAME.search(filename):
        return False
    return not any(d.lower() in _IGNORED_DIRS for d in dirs)


def name_from_path(path: str) -> str:
    filename = path.rsplit("/", 1)[-1]
    return title_case(_COMPONENT_EXTENSION.sub("", filename))


def category_from_path(path: str) -> str:
    """Nearest parent directory that says something about the component."""
    dirs = path.split("/")[:-1]
    for directory in reversed(dirs):
        if directory.lower() in _GENERIC_DIRS:
            continue
        return title_case(directory)
    return _DEFAULT_CATEGORY


def components_from_tree(
    items: list[GitHubTreeItem], owner: str, repo: str
) -> list[LibraryComponent]:
    """Filter, name and deduplicate tree entries.

    Duplicate names keep the shortest path; on a tie the first one seen wins.
    """
    chosen: dict[str, tuple[str, str]] = {}  # key -> (name, path)
    for item in items:
        if not is_component_file(item):
            continue
        name = name_from_path(item.path)
        key = normalize_name(name)
        existing = chosen.get(key)
        if existing is None or len(item.path) < len(existing[1]):
            chosen[key] = (name, item.path)

    ids: set[str] = set()
    return [
        LibraryComponent(
            id=unique_id(f"gh-{slugify(name) or key}", ids),
            name=name,
            category=category_from_path(path),
            description=f"Component from {owner}/{repo}",
        )
        for key, (name, path) in chosen.items()
    ]


def _headers(settings: Settings) -> dict[str, str]:
    headers = {"Accept": "application/vnd.github+json"}
    if settings.github.token:
        headers["Authorization"] = f"Bearer {settings.github.token}"
    return headers


async def scan_github(url: str, fetcher: Fetcher, settings: Settings) -> DesignLibrary | None:
    """Resolve a GitHub repository URL into a library, or None."""
    parsed = parse_repo(url)
    if parsed is None:
        return None
    owner, repo = parsed
    api = settings.github.api_url.rstrip("/")
    headers = _headers(settings)

    try:
        repo_data = GitHubRepo.model_validate(
            await fetcher.fetch_json(f"{api}/repos/{owner}/{repo}", headers=headers)
        )
        branch = repo_data.default_branch or "main"
        tree = GitHubTree.model_validate(
            await fetcher.fetch_json(
                f"{api}/repos/{owner}/{repo}/git/trees/{branch}?recursive=1", headers=headers
            )
        )
    except DesignLibError as exc:
        log.warning("github_fetch_failed", repo=f"{owner}/{repo}", code=exc.code, error=exc.message)
        return None
    except ValidationError:
        log.warning("github_payload_invalid", repo=f"{owner}/{repo}", exc_info=True)
        return None

    if tree.truncated:
        log.warning("github_tree_truncated", repo=f"{owner}/{repo}", entries=len(tree.tree))

    components = components_from_tree(tree.tree, owner, repo)
    if not components:
        log.info("github_no_components", repo=f"{owner}/{repo}", entries=len(tree.tree))
        return None

    return DesignLibrary(
        name=repo_data.name or f"{owner}/{repo}",
        description=repo_data.description or f"GitHub repository: {owner}/{repo}",
        source=LibrarySource.GITHUB,
        source_url=url,
        components=components,
    )
