from __future__ import annotations

from collections.abc import Iterable

from relvars.core.result import Err
from relvars.release.model import TagRef
from relvars.release.semver import parse_semver, strip_v_prefix


def normalize_tag_name(name: str) -> str:
    """v1.2.3-RC.1 -> 1.2.3-rc.1"""
    return strip_v_prefix(name).lower()


def normalize_tags(tags: Iterable[TagRef]) -> dict[str, TagRef]:
    """Index semver tags by normalized version.

    Repositories commonly carry non-semver tags (nightly, latest, ...);
    those are skipped. When two tags normalize to the same key the last one
    wins.
    """
    out: dict[str, TagRef] = {}
    for tag in tags:
        key = normalize_tag_name(tag.name)
        if isinstance(parse_semver(key), Err):
            continue
        out[key] = tag
    return out
