"""Project snapshot utilities.

This package walks a project directory, filters it with .gitignore-style
exclusion rules and writes a single Markdown document holding the file tree
followed by the contents of every surviving file.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirsnap")
except PackageNotFoundError:
    __version__ = "unknown"
