# Fortune package initializer
# Re-export commonly used helpers for convenience
from . import catalog, selector, config, emblem, logging_utils
from .catalog import FORTUNES, InvalidCatalogSize
from .selector import Selector

__all__ = [
    "catalog",
    "selector",
    "config",
    "emblem",
    "logging_utils",
    "FORTUNES",
    "InvalidCatalogSize",
    "Selector",
]
