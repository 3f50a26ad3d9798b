# ============================================================
# uigen/catalog/loader.py
# ------------------------------------------------------------
# Loads the prestyled component corpus (components.yaml).
# The corpus is read once at startup and shared read-only;
# entry order in the file is the order used in the instruction.
# ============================================================

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Tuple

import yaml

from uigen.errors import CatalogError

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "components.yaml"

_REQUIRED_KEYS = ("name", "import_instructions", "usage_instructions")


@dataclass(frozen=True)
class CatalogEntry:
    """Documentation for one prestyled UI component."""
    name: str
    import_instructions: str
    usage_instructions: str


def _parse_entry(raw, index: int) -> CatalogEntry:
    if not isinstance(raw, dict):
        raise CatalogError(f"catalog entry #{index} is not a mapping")
    missing = [k for k in _REQUIRED_KEYS if not isinstance(raw.get(k), str)]
    if missing:
        raise CatalogError(f"catalog entry #{index} is missing {', '.join(missing)}")
    return CatalogEntry(
        name=raw["name"].strip(),
        import_instructions=raw["import_instructions"].strip(),
        usage_instructions=raw["usage_instructions"].strip(),
    )


def parse_catalog(data) -> Tuple[CatalogEntry, ...]:
    """Turn the decoded YAML document into catalog entries."""
    components = data.get("components") if isinstance(data, dict) else data
    if not isinstance(components, list):
        raise CatalogError("catalog must be a list of components")
    return tuple(_parse_entry(raw, i) for i, raw in enumerate(components))


@lru_cache(maxsize=4)
def load_catalog(path: str | Path = DEFAULT_CATALOG_PATH) -> Tuple[CatalogEntry, ...]:
    path = Path(path)
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or []
        except yaml.YAMLError as e:
            raise CatalogError(f"Catalog file is not valid YAML: {path}") from e
    return parse_catalog(data)
