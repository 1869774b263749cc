"""Tag ordering strategies for release listings."""

from __future__ import annotations

from typing import Iterable

from packaging.version import InvalidVersion, Version


def _parse(tag: str) -> Version | None:
    candidate = tag[1:] if tag[:1] in {"v", "V"} else tag
    try:
        return Version(candidate)
    except InvalidVersion:
        return None


def sort_lexicographic(tags: Iterable[str]) -> list[str]:
    return sorted(tags, reverse=True)


def sort_semver(tags: Iterable[str]) -> list[str]:
    """Newest version first; tags that are not versions go last, in string order."""
    versioned: list[tuple[Version, str]] = []
    others: list[str] = []
    for tag in tags:
        parsed = _parse(tag)
        if parsed is None:
            others.append(tag)
        else:
            versioned.append((parsed, tag))
    versioned.sort(key=lambda item: (item[0], item[1]), reverse=True)
    return [tag for _, tag in versioned] + sorted(others, reverse=True)


def sort_tags(tags: Iterable[str], ordering: str = "lexicographic") -> list[str]:
    if ordering == "semver":
        return sort_semver(tags)
    if ordering == "lexicographic":
        return sort_lexicographic(tags)
    raise ValueError(f"Unknown tag ordering: {ordering}")


__all__ = ["sort_lexicographic", "sort_semver", "sort_tags"]
