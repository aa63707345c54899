"""Scene Catalog loader - reads and validates the JSON catalog a run is built from."""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from reel_factory.models.schemas import SceneCatalog
from reel_factory.utils.error_handler import CatalogError

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "default_catalog.json"


def load_catalog(path: Optional[str | Path] = None, logger: Optional[Any] = None) -> SceneCatalog:
    """
    Load a scene catalog from JSON.

    Args:
        path: Catalog file. The bundled default catalog is used when None.
        logger: Optional logger instance

    Returns:
        Validated, immutable SceneCatalog

    Raises:
        CatalogError: If the file is missing, is not JSON, or fails validation
    """
    catalog_path = Path(path) if path else DEFAULT_CATALOG_PATH
    if logger:
        logger.info(f"Loading scene catalog: {catalog_path}")

    if not catalog_path.exists():
        raise CatalogError(f"catalog file not found: {catalog_path}")

    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogError(f"catalog {catalog_path} is not valid JSON: {e}") from e

    try:
        catalog = SceneCatalog.model_validate(data)
    except ValidationError as e:
        raise CatalogError(f"catalog {catalog_path} failed validation:\n{e}") from e

    if logger:
        logger.info(f"Loaded {len(catalog.scenes)} scenes: {catalog.script_title}")
    return catalog
