from __future__ import annotations

from relvars.release.model import TagRef
from relvars.release.tags import normalize_tag_name, normalize_tags


def test_normalize_tag_name() -> None:
    assert normalize_tag_name("v1.0.0") == "1.0.0"
    assert normalize_tag_name("V1.0.0-RC.1") == "1.0.0-rc.1"
    assert normalize_tag_name("2.0.0") == "2.0.0"


def test_normalize_tags_keys_by_version() -> None:
    t1 = TagRef(name="v1.0.0", sha="a")
    t2 = TagRef(name="2.0.0", sha="b")
    assert normalize_tags([t1, t2]) == {"1.0.0": t1, "2.0.0": t2}


def test_normalize_tags_skips_non_semver() -> None:
    tags = [TagRef("latest"), TagRef("v1"), TagRef("nightly-2024"), TagRef("v1.2.3")]
    assert list(normalize_tags(tags)) == ["1.2.3"]


def test_normalize_tags_last_write_wins() -> None:
    first = TagRef(name="v1.0.0", sha="a")
    second = TagRef(name="1.0.0", sha="b")
    assert normalize_tags([first, second]) == {"1.0.0": second}


def test_normalize_tags_empty() -> None:
    assert normalize_tags([]) == {}
