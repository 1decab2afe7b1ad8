"""
Detecting the library's own version.

The codebase does not contain the version directly, as it would require
code changes on every release. The releases depend on tagging rather
than in-code version bumps: versions belong to the versioning system,
not to the codebase.

The version is determined only once at import time.
"""
import importlib.metadata

version: str | None = None

try:
    version = importlib.metadata.version('pixelforge-utils')
except importlib.metadata.PackageNotFoundError:
    pass  # running from a source checkout without installation
