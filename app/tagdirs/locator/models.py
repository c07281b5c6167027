"""Locator domain models.

This module defines the filter criteria used to decide whether a
directory is a tagged directory, the record produced for every match,
and the marker-file naming convention for tags.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from os import DirEntry
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Prefix joined with a tag name to form its marker file name
DEFAULT_MARKER_PREFIX = ".tag-"


def marker_name(tag: str, prefix: str = DEFAULT_MARKER_PREFIX) -> str:
    """Return the marker file name representing ``tag``.

    Args:
        tag: Tag name (e.g. "media").
        prefix: Marker prefix (default ".tag-").

    Returns:
        Marker file name (e.g. ".tag-media").
    """
    return f"{prefix}{tag}"


def _ordered_unique(values: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicates while keeping first-seen order."""
    return tuple(dict.fromkeys(values))


class FilterSpec(BaseModel):
    """Criteria a directory must satisfy to be reported as tagged.

    Each criterion is an ordered set of names. An empty set imposes no
    constraint, so a FilterSpec with all four sets empty matches every
    directory.

    Attributes:
        has_tags: Tags whose markers must all be present.
        lacks_tags: Tags whose markers must all be absent.
        has_files: File names that must all exist in the directory.
        lacks_files: File names that must all be absent. Entries with these
            names are also never recursed into.
        marker_prefix: Prefix joined with a tag name to form its marker file.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    has_tags: tuple[str, ...] = ()
    lacks_tags: tuple[str, ...] = ()
    has_files: tuple[str, ...] = ()
    lacks_files: tuple[str, ...] = ()
    marker_prefix: Annotated[
        str,
        Field(min_length=1, description="Marker file prefix"),
    ] = DEFAULT_MARKER_PREFIX

    @field_validator("has_tags", "lacks_tags", mode="after")
    @classmethod
    def validate_tags(cls, v: tuple[str, ...], info: Any) -> tuple[str, ...]:
        """Reject empty tag names and tag names containing a path separator."""
        for tag in v:
            if not tag:
                msg = f"{info.field_name}: tag name cannot be empty"
                raise ValueError(msg)
            if "/" in tag:
                msg = f"{info.field_name}: tag name cannot contain '/': {tag!r}"
                raise ValueError(msg)
        return _ordered_unique(v)

    @field_validator("has_files", "lacks_files", mode="after")
    @classmethod
    def validate_filenames(cls, v: tuple[str, ...], info: Any) -> tuple[str, ...]:
        """Require plain file names (no directories, no path components)."""
        for name in v:
            if not name or name in (".", ".."):
                msg = f"{info.field_name}: invalid file name {name!r}"
                raise ValueError(msg)
            if "/" in name:
                msg = f"{info.field_name}: file name cannot contain '/': {name!r}"
                raise ValueError(msg)
        return _ordered_unique(v)

    @field_validator("marker_prefix", mode="after")
    @classmethod
    def validate_marker_prefix(cls, v: str) -> str:
        """Marker prefix must be usable as part of a file name."""
        if "/" in v:
            msg = f"marker_prefix cannot contain '/': {v!r}"
            raise ValueError(msg)
        return v

    def marker(self, tag: str) -> str:
        """Return the marker file name for ``tag`` using this filter's prefix."""
        return marker_name(tag, self.marker_prefix)

    def merged(self, **extra: Iterable[str]) -> "FilterSpec":
        """Return a new FilterSpec with additional names appended per field.

        Args:
            **extra: Field name to extra names, e.g. ``lacks_files=[".git"]``.

        Returns:
            New FilterSpec; existing names keep their position.
        """
        data = self.model_dump()
        for key, values in extra.items():
            data[key] = (*data[key], *values)
        return FilterSpec.model_validate(data)


@dataclass(frozen=True, slots=True)
class DirectoryRecord:
    """A directory that satisfied the filter.

    Attributes:
        name: Base name of the absolute path.
        path: Path as discovered (root as given joined with the subpath).
        abs_path: Canonical absolute path.
    """

    name: str
    path: str
    abs_path: str

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if not self.abs_path:
            msg = "Absolute path cannot be empty"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, str]:
        """Convert to a JSON-serializable dictionary."""
        return {"name": self.name, "path": self.path, "abs_path": self.abs_path}


@dataclass(frozen=True, slots=True)
class FilterOutcome:
    """Result of evaluating one directory against a FilterSpec.

    Attributes:
        is_match: True if the directory satisfied every criterion.
        to_recurse: Child directory entries to descend into (empty on match).
    """

    is_match: bool
    to_recurse: tuple[DirEntry[str], ...] = field(default=())
