"""Data loading utilities."""

from .catalog_loader import (
    load_catalog,
    load_practice_logs,
    load_practice_records,
    parse_practice_logs,
    parse_practice_records,
)

__all__ = [
    "load_catalog",
    "load_practice_logs",
    "load_practice_records",
    "parse_practice_logs",
    "parse_practice_records",
]
