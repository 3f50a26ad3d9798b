# Prestyled component catalog (shadcn/ui docs) used by the instruction composer.

from .loader import CatalogEntry, DEFAULT_CATALOG_PATH, load_catalog, parse_catalog

__all__ = ["CatalogEntry", "DEFAULT_CATALOG_PATH", "load_catalog", "parse_catalog"]
