"""
modules/catalog package — where attractions come from.

    AttractionSource / build_source   data-access boundary (static, postgres, remote)
    AttractionStore                   validated, read-only sequence loaded once
"""
from modules.catalog.attraction_store import AttractionStore
from modules.catalog.errors import AttractionRetrievalError, UnknownAttractionError
from modules.catalog.sources import (
    AttractionSource,
    CachedAttractionSource,
    PostgresAttractionSource,
    StaticAttractionSource,
    build_source,
)

__all__ = [
    "AttractionStore",
    "AttractionRetrievalError",
    "UnknownAttractionError",
    "AttractionSource",
    "CachedAttractionSource",
    "PostgresAttractionSource",
    "StaticAttractionSource",
    "build_source",
]
