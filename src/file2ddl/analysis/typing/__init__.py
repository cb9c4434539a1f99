"""Type inference building blocks: tokenizer, recognizers, catalogs, dialects."""

from file2ddl.analysis.typing.catalog import CatalogError, TypeCandidate, TypeCatalog, TypeRank
from file2ddl.analysis.typing.dialects import available_dialects, get_catalog, register_dialect
from file2ddl.analysis.typing.tokenizer import split_fields

__all__ = [
    "CatalogError",
    "TypeCandidate",
    "TypeCatalog",
    "TypeRank",
    "available_dialects",
    "get_catalog",
    "register_dialect",
    "split_fields",
]
