from __future__ import annotations

from importlib import metadata

from compendium.domain.migration import migrate

try:
    __version__ = metadata.version("compendium")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = ["__version__", "migrate"]
