"""Tests for locator domain models."""

import pytest
from pydantic import ValidationError
from tagdirs.locator.models import DEFAULT_MARKER_PREFIX, DirectoryRecord, FilterSpec, marker_name


class TestMarkerName:
    """Tests for marker_name."""

    def test_default_prefix(self) -> None:
        """Tags map to .tag-<name> by default."""
        assert DEFAULT_MARKER_PREFIX == ".tag-"
        assert marker_name("media") == ".tag-media"

    def test_custom_prefix(self) -> None:
        """A custom prefix is joined verbatim."""
        assert marker_name("media", ".is-") == ".is-media"


class TestFilterSpec:
    """Tests for FilterSpec validation and helpers."""

    def test_defaults_are_empty(self) -> None:
        """Every criterion defaults to an empty tuple, not None."""
        spec = FilterSpec()
        assert spec.has_tags == ()
        assert spec.lacks_tags == ()
        assert spec.has_files == ()
        assert spec.lacks_files == ()

    def test_accepts_lists(self) -> None:
        """Lists are coerced to tuples."""
        spec = FilterSpec(has_tags=["media"], lacks_files=[".git"])  # type: ignore[arg-type]
        assert spec.has_tags == ("media",)
        assert spec.lacks_files == (".git",)

    def test_duplicates_dropped_order_kept(self) -> None:
        """Criteria behave as ordered sets."""
        spec = FilterSpec(has_tags=("b", "a", "b", "c", "a"))
        assert spec.has_tags == ("b", "a", "c")

    def test_rejects_empty_tag(self) -> None:
        """Empty tag names are invalid."""
        with pytest.raises(ValidationError, match="tag name cannot be empty"):
            FilterSpec(has_tags=("",))

    def test_rejects_tag_with_slash(self) -> None:
        """Tag names cannot contain a path separator."""
        with pytest.raises(ValidationError, match="cannot contain '/'"):
            FilterSpec(lacks_tags=("a/b",))

    @pytest.mark.parametrize("name", ["", ".", "..", "sub/file"])
    def test_rejects_invalid_file_names(self, name: str) -> None:
        """File criteria must be plain file names."""
        with pytest.raises(ValidationError):
            FilterSpec(has_files=(name,))

    def test_rejects_unknown_fields(self) -> None:
        """Unknown criteria are rejected."""
        with pytest.raises(ValidationError):
            FilterSpec(has_tag=("media",))  # type: ignore[call-arg]

    def test_rejects_empty_marker_prefix(self) -> None:
        """Marker prefix cannot be empty."""
        with pytest.raises(ValidationError):
            FilterSpec(marker_prefix="")

    def test_is_frozen(self) -> None:
        """FilterSpec cannot be mutated after creation."""
        spec = FilterSpec()
        with pytest.raises(ValidationError):
            spec.has_tags = ("media",)  # type: ignore[misc]

    def test_marker_uses_prefix(self) -> None:
        """marker() honors the filter's prefix."""
        assert FilterSpec().marker("media") == ".tag-media"
        assert FilterSpec(marker_prefix="_").marker("media") == "_media"

    def test_merged_appends(self) -> None:
        """merged() appends names after existing ones, without duplicates."""
        spec = FilterSpec(lacks_files=("node_modules",))
        merged = spec.merged(lacks_files=[".git", "node_modules"])

        assert merged.lacks_files == ("node_modules", ".git")
        assert spec.lacks_files == ("node_modules",)


class TestDirectoryRecord:
    """Tests for DirectoryRecord."""

    def test_to_dict(self) -> None:
        """to_dict exposes name, path and abs_path."""
        record = DirectoryRecord(name="a", path="./a", abs_path="/root/a")
        assert record.to_dict() == {"name": "a", "path": "./a", "abs_path": "/root/a"}

    def test_empty_abs_path_rejected(self) -> None:
        """A record needs an absolute path."""
        with pytest.raises(ValueError, match="Absolute path cannot be empty"):
            DirectoryRecord(name="a", path="a", abs_path="")

    def test_is_immutable(self) -> None:
        """Records are frozen."""
        record = DirectoryRecord(name="a", path="a", abs_path="/a")
        with pytest.raises(AttributeError):
            record.name = "b"  # type: ignore[misc]
