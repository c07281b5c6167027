"""Tagged-directory locator.

This module provides the pruning directory walk, the filter predicate,
the filter and record models, and the diagnostics sinks it reports to.
"""

from tagdirs.locator.diagnostics import (
    TRACE,
    Diagnostics,
    LoggingDiagnostics,
    RecordingDiagnostics,
)
from tagdirs.locator.models import (
    DEFAULT_MARKER_PREFIX,
    DirectoryRecord,
    FilterOutcome,
    FilterSpec,
    marker_name,
)
from tagdirs.locator.predicate import evaluate_and_filter
from tagdirs.locator.walker import (
    LocatorError,
    NoRootsError,
    PathResolutionError,
    TaggedDirLocator,
    list_tagged_dirs,
)

__all__ = [
    "DEFAULT_MARKER_PREFIX",
    "TRACE",
    "Diagnostics",
    "DirectoryRecord",
    "FilterOutcome",
    "FilterSpec",
    "LocatorError",
    "LoggingDiagnostics",
    "NoRootsError",
    "PathResolutionError",
    "RecordingDiagnostics",
    "TaggedDirLocator",
    "evaluate_and_filter",
    "list_tagged_dirs",
    "marker_name",
]
