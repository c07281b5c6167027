"""tagdirs - Locate tagged directories.

A tagged directory is a directory carrying one or more marker files
named ``.tag-<TAG>``. tagdirs searches one or more roots for such
directories without descending into the ones it has already found.
"""

__version__ = "0.1.0"
