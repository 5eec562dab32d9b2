from __future__ import annotations

from dynsha256.__about__ import __author__, __version__
from dynsha256.circuit import Circuit

__all__ = [
    "__version__",
    "__author__",
    "Circuit"
]
