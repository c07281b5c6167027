"""Tagged-directory locator.

Walks one or more roots depth-first and collects the directories that
satisfy a FilterSpec. Once a directory matches, its subtree is pruned:
nothing below it is listed or reported. Roots and siblings are visited in
a deterministic order, so repeated runs over an unchanged tree yield the
same result.
"""

import logging
import os
from collections.abc import Sequence
from os import DirEntry
from pathlib import Path

from tagdirs.locator.diagnostics import Diagnostics, LoggingDiagnostics
from tagdirs.locator.models import DirectoryRecord, FilterSpec
from tagdirs.locator.predicate import evaluate_and_filter

logger = logging.getLogger(__name__)

NO_ROOTS_MESSAGE = "Please specify one or more directories to search"


class LocatorError(Exception):
    """Base exception for locator errors.

    Attributes:
        exit_code: Process exit code a CLI should use for this error.
    """

    exit_code: int = 1


class NoRootsError(LocatorError):
    """Raised when no root directory was given."""

    exit_code = 2

    def __init__(self, message: str = NO_ROOTS_MESSAGE) -> None:
        super().__init__(message)


class PathResolutionError(LocatorError):
    """Raised when a directory's canonical path cannot be determined mid-walk."""

    exit_code = 3


# A pending directory: (path as discovered, canonical absolute path)
_Frame = tuple[str, str]


class TaggedDirLocator:
    """Finds tagged directories under a list of roots.

    Args:
        filter_spec: Criteria a directory must satisfy. Defaults to an
            empty FilterSpec, which matches every root.
        diagnostics: Sink for warnings, trace notices and fatal errors.
            Defaults to a LoggingDiagnostics writing to ``tagdirs.locator``.
    """

    def __init__(
        self,
        filter_spec: FilterSpec | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> None:
        self._filter = filter_spec or FilterSpec()
        self._diagnostics = diagnostics or LoggingDiagnostics()

    @property
    def filter_spec(self) -> FilterSpec:
        """The criteria this locator evaluates."""
        return self._filter

    def locate(self, roots: Sequence[str | os.PathLike[str]]) -> list[DirectoryRecord]:
        """Search every root and return the matching directories.

        Args:
            roots: Root directories, searched in the given order.

        Returns:
            Matching directories in depth-first pre-order.

        Raises:
            NoRootsError: If ``roots`` is empty. No filesystem access happens.
            PathResolutionError: If a root's canonical path cannot be resolved
                after it was found to be a directory.
        """
        if not roots:
            raise NoRootsError

        records: list[DirectoryRecord] = []
        seen: set[str] = set()
        for root in roots:
            root_str = os.fspath(root)
            if not os.path.isdir(root_str):
                self._diagnostics.warn(
                    "Not a directory '%s', skip searching tagged directories in it", root_str
                )
                continue

            abs_root = self._resolve(root_str)
            if abs_root in seen:
                self._diagnostics.trace("Skipping duplicate root %s (%s)", root_str, abs_root)
                continue
            seen.add(abs_root)

            records.extend(self._walk(root_str, abs_root))

        logger.debug("Found %d tagged directories in %d root(s)", len(records), len(roots))
        return records

    def _resolve(self, path: str) -> str:
        """Return the canonical absolute path of a directory being entered."""
        try:
            return str(Path(path).resolve(strict=True))
        except (OSError, RuntimeError) as e:
            self._diagnostics.fatal("Can't determine absolute path of %s: %s", path, e)
            raise PathResolutionError(f"Can't determine absolute path of {path}: {e}") from e

    def _walk(self, root: str, abs_root: str) -> list[DirectoryRecord]:
        """Walk a single root with an explicit stack.

        Children are pushed in reverse so they are popped in sorted order,
        which keeps the pre-order of a recursive walk.
        """
        records: list[DirectoryRecord] = []
        stack: list[_Frame] = [(root, abs_root)]

        while stack:
            path, abs_path = stack.pop()

            entries = self._list(path)
            if entries is None:
                continue

            outcome = evaluate_and_filter(entries, path, self._filter)
            if outcome.is_match:
                self._diagnostics.trace("%s matches", abs_path)
                records.append(
                    DirectoryRecord(
                        name=os.path.basename(abs_path),
                        path=path,
                        abs_path=abs_path,
                    )
                )
                continue

            self._diagnostics.trace("Recursing into %s ...", path)
            for entry in reversed(outcome.to_recurse):
                stack.append(
                    (os.path.join(path, entry.name), os.path.join(abs_path, entry.name))
                )

        return records

    def _list(self, path: str) -> list[DirEntry[str]] | None:
        """List a directory sorted by name, or None if it cannot be read."""
        try:
            with os.scandir(path) as it:
                return sorted(it, key=lambda e: e.name)
        except OSError as e:
            self._diagnostics.warn("Can't read directory %s: %s", path, e)
            return None


def list_tagged_dirs(
    roots: Sequence[str | os.PathLike[str]],
    filter_spec: FilterSpec | None = None,
    *,
    detail: bool = False,
    diagnostics: Diagnostics | None = None,
) -> list[DirectoryRecord] | list[str]:
    """Search roots for tagged directories.

    Args:
        roots: Root directories, searched in the given order.
        filter_spec: Criteria a directory must satisfy.
        detail: If True, return full records; otherwise absolute paths only.
        diagnostics: Sink for locator diagnostics.

    Returns:
        DirectoryRecord list when ``detail`` is True, else list of absolute
        path strings. Both are in traversal order.

    Raises:
        NoRootsError: If ``roots`` is empty.
        PathResolutionError: If canonical path resolution fails mid-walk.
    """
    records = TaggedDirLocator(filter_spec, diagnostics).locate(roots)
    if detail:
        return records
    return [record.abs_path for record in records]
