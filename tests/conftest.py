"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

TreeBuilder = Callable[..., Path]


def build_tree(base: Path, *entries: str) -> Path:
    """Create files and directories below ``base``.

    Entries ending in "/" are directories, everything else is an empty
    file. Parent directories are created as needed.
    """
    base.mkdir(parents=True, exist_ok=True)
    for entry in entries:
        target = base / entry
        if entry.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.touch()
    return base


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeBuilder:
    """Return a builder creating a directory tree under tmp_path.

    Usage: ``root = make_tree("r", "x/.tag-media", "x/y/")``
    """

    def _make(name: str, *entries: str) -> Path:
        return build_tree(tmp_path / name, *entries).resolve()

    return _make


@pytest.fixture
def media_tree(make_tree: TreeBuilder) -> Path:
    """A media collection with tagged directories at different depths.

    media/
      2020/media-2020a/.tag-media
      2020/media-2020b/.tag-media
      2020/media-2020b/nested/.tag-media   (pruned)
      2021/media-2021a/.tag-media
      2021/media-2021a/.git/
      etc/foo/.tag-media
      etc/others/bar/.tag-media
      etc/others/bar/.tag-archive
      notes.txt
    """
    return make_tree(
        "media",
        "2020/media-2020a/.tag-media",
        "2020/media-2020b/.tag-media",
        "2020/media-2020b/nested/.tag-media",
        "2021/media-2021a/.tag-media",
        "2021/media-2021a/.git/",
        "etc/foo/.tag-media",
        "etc/others/bar/.tag-media",
        "etc/others/bar/.tag-archive",
        "notes.txt",
    )


@pytest.fixture(autouse=True)
def reset_tagdirs_logger() -> Iterator[None]:
    """Undo logging configuration done by CLI invocations."""
    yield
    logger = logging.getLogger("tagdirs")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
