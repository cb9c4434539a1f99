"""Dialect registry.

Maps a database flavor name to its TypeCatalog. Built-in catalogs live in
``file2ddl/config/dialects/*.yaml``; an extra directory can be configured
with ``FILE2DDL_DIALECTS_PATH`` and catalogs can be registered at runtime.

Usage:
    from file2ddl.analysis.typing.dialects import get_catalog

    catalog = get_catalog("postgresql")
    catalog.infer_rank("32768")
"""

from __future__ import annotations

from pathlib import Path

import yaml

from file2ddl.analysis.typing.catalog import CatalogError, TypeCatalog
from file2ddl.core.config import get_settings
from file2ddl.core.errors import ConfigurationError
from file2ddl.core.logging import get_logger

logger = get_logger(__name__)

BUILTIN_DIALECTS_DIR = Path(__file__).resolve().parent.parent.parent / "config" / "dialects"

_registered: dict[str, TypeCatalog] = {}


def _search_dirs() -> list[Path]:
    dirs = []
    extra = get_settings().dialects_path
    if extra is not None:
        dirs.append(extra)
    dirs.append(BUILTIN_DIALECTS_DIR)
    return dirs


def load_catalog(path: Path, dialect: str | None = None) -> TypeCatalog:
    """Load a type catalog from a YAML file.

    Args:
        path: YAML file with a ``types`` list
        dialect: Dialect name, defaults to the file stem

    Raises:
        CatalogError: If the file is not a valid catalog
    """
    dialect = dialect or path.stem.lower()
    try:
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise CatalogError(dialect, f"failed to load {path}: {e}") from e

    if not isinstance(config, dict):
        raise CatalogError(dialect, f"{path} does not contain a mapping")

    catalog = TypeCatalog.from_config(dialect, config)
    logger.debug("catalog_loaded", dialect=dialect, path=str(path), types=len(catalog))
    return catalog


def register_dialect(dialect: str, catalog: TypeCatalog) -> None:
    """Make ``catalog`` available under ``dialect`` (case-insensitive)."""
    _registered[dialect.lower()] = catalog


def available_dialects() -> list[str]:
    """Names of all dialects that ``get_catalog`` can resolve."""
    names = set(_registered)
    for directory in _search_dirs():
        if directory.is_dir():
            names.update(p.stem.lower() for p in directory.glob("*.yaml"))
    return sorted(names)


def get_catalog(dialect: str) -> TypeCatalog:
    """Resolve a dialect name to its type catalog.

    Registered catalogs win over YAML files; a configured dialects directory
    wins over the built-in one.

    Raises:
        ConfigurationError: If the dialect is unknown
    """
    key = dialect.lower()
    if key in _registered:
        return _registered[key]

    for directory in _search_dirs():
        path = directory / f"{key}.yaml"
        if path.is_file():
            catalog = load_catalog(path, key)
            _registered[key] = catalog
            return catalog

    supported = ", ".join(available_dialects())
    raise ConfigurationError(
        f"unsupported database flavor: {dialect}. Supported flavors: {supported}"
    )
