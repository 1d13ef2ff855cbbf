from __future__ import annotations

from packsolve.__version__ import __version__


__all__ = ["__version__"]
