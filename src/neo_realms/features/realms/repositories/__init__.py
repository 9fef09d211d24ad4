"""Concrete realm implementations."""

from .database_realm import DatabaseRealm
from .memory_realm import MemoryRealm
from .properties_parser import (
    build_accounts,
    parse_properties,
    read_properties_file,
    resolve_properties_path,
)
from .properties_realm import PropertiesRealm

__all__ = [
    "DatabaseRealm",
    "MemoryRealm",
    "PropertiesRealm",
    "build_accounts",
    "parse_properties",
    "read_properties_file",
    "resolve_properties_path",
]
