"""Match predicate for tagged directories.

Decides, from a directory's own listing, whether the directory matches a
FilterSpec and which of its children the walk should descend into.
"""

import os
from collections.abc import Iterable, Sequence
from os import DirEntry

from tagdirs.locator.models import FilterOutcome, FilterSpec


def _entry_exists(entry: DirEntry[str], directory: str) -> bool:
    """Check existence the way a path test does: symlinks are followed.

    An entry that can no longer be inspected counts as absent.
    """
    try:
        if entry.is_symlink():
            return os.path.exists(os.path.join(directory, entry.name))
    except OSError:
        return False
    return True


def present_names(entries: Iterable[DirEntry[str]], directory: str) -> frozenset[str]:
    """Return the names of entries in ``directory`` that exist.

    Dangling symlinks, and entries that vanished or became unreadable
    since the listing, are left out.
    """
    return frozenset(entry.name for entry in entries if _entry_exists(entry, directory))


def matches(names: frozenset[str], filter_spec: FilterSpec) -> bool:
    """Evaluate the filter against the set of names present in a directory.

    Criteria are checked in a fixed order, each short-circuiting on the
    first failing name: required tags, excluded tags, required files,
    excluded files.

    Args:
        names: Names present directly in the directory.
        filter_spec: Criteria to evaluate.

    Returns:
        True if no criterion rejected the directory.
    """
    for tag in filter_spec.has_tags:
        if filter_spec.marker(tag) not in names:
            return False
    for tag in filter_spec.lacks_tags:
        if filter_spec.marker(tag) in names:
            return False
    for name in filter_spec.has_files:
        if name not in names:
            return False
    for name in filter_spec.lacks_files:
        if name in names:
            return False
    return True


def evaluate_and_filter(
    entries: Sequence[DirEntry[str]],
    directory: str,
    filter_spec: FilterSpec,
) -> FilterOutcome:
    """Decide whether a directory matches and which children to walk next.

    A matching directory is never descended into. For a non-matching one,
    children named in ``lacks_files`` are dropped even when they are
    directories, and of the rest only real directories are kept. Symlinks
    to directories are not followed.

    Args:
        entries: The directory's entries, in the order they should be walked.
        directory: Path of the directory the entries were listed from. Symlinked
            markers are resolved against it.
        filter_spec: Criteria to evaluate.

    Returns:
        FilterOutcome with the match decision and the children to recurse into.
    """
    if matches(present_names(entries, directory), filter_spec):
        return FilterOutcome(is_match=True)

    excluded = set(filter_spec.lacks_files)
    to_recurse: list[DirEntry[str]] = []
    for entry in entries:
        if entry.name in excluded:
            continue
        try:
            if not entry.is_dir(follow_symlinks=False):
                continue
        except OSError:
            continue
        to_recurse.append(entry)

    return FilterOutcome(is_match=False, to_recurse=tuple(to_recurse))
