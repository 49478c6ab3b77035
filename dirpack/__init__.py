"""dirpack - Package directories into ZIP or tar.gz archives.

Stateless archive entry points live in :mod:`dirpack.compress`.
"""

__version__ = "0.1.0"
__author__ = "dirpack Contributors"

from dirpack.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
