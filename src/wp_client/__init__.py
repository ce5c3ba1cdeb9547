# noqa: D104
"""Top-level package for wp_client."""
from __future__ import annotations

__version__ = "0.1.0"
__all__ = [
    "WikiPathwaysClient",
    "ClientSettings",
    "WSAuth",
    "Pathway",
    "Organism",
    "DataSource",
    "Xref",
    "ConverterError",
    "NotAuthenticatedError",
    "WikiPathwaysError",
]

_LAZY = {
    "WikiPathwaysClient": ".client",
    "ClientSettings": ".config",
    "WSAuth": ".models",
    "Pathway": ".gpml",
    "Organism": ".bio",
    "DataSource": ".bio",
    "Xref": ".bio",
    "ConverterError": ".exceptions",
    "NotAuthenticatedError": ".exceptions",
    "WikiPathwaysError": ".exceptions",
}


def __getattr__(name):  # type: ignore[override]
    if name in _LAZY:
        from importlib import import_module

        return getattr(import_module(_LAZY[name], __name__), name)
    raise AttributeError(name)
