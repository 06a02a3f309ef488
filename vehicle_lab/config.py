"""Configuration loader for the vehicle prototype lab."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from vehicle_lab.core.part import PartKind, PartSpec

logger = logging.getLogger(__name__)

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
CATALOG_PATH: Path = DATA_DIR / "catalog.yaml"

_REQUIRED_FIELDS: tuple[str, ...] = (
    "kind",
    "label",
    "durability_delta",
    "efficiency_delta",
)

_NUMERIC_FIELDS: tuple[str, ...] = _REQUIRED_FIELDS[2:]  # the two deltas


def load_catalog(path: Path | None = None) -> dict[PartKind, PartSpec]:
    """Load the part catalog from a YAML file.

    Each entry is validated and converted into a :class:`PartSpec`
    keyed by its :class:`PartKind`.

    Args:
        path: Optional override for the catalog file path.

    Returns:
        Mapping covering every part kind.

    Raises:
        FileNotFoundError: If the catalog file does not exist.
        InvalidPartKind: If an entry names an unknown part kind.
        ValueError: If an entry is missing fields, has non-numeric
            deltas, repeats a kind, or the catalog leaves a kind out.
    """
    catalog_path = path or CATALOG_PATH
    if not catalog_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {catalog_path}")

    with open(catalog_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    if not isinstance(data, dict):
        raise ValueError(
            f"Catalog root must be a mapping, got {type(data).__name__}"
        )

    entries = data.get("parts") or []
    if not isinstance(entries, list):
        raise ValueError("Catalog 'parts' must be a list of entries")
    catalog: dict[PartKind, PartSpec] = {}

    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Part entry {idx} must be a mapping")

        # --- Validate required fields ---
        for field in _REQUIRED_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Part entry {idx} ({entry.get('kind', '<unknown>')}) "
                    f"is missing required field '{field}'"
                )

        # --- Validate numeric deltas ---
        for field in _NUMERIC_FIELDS:
            val = entry[field]
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise ValueError(
                    f"Part entry {idx} ({entry['kind']}): "
                    f"'{field}' must be numeric, got {type(val).__name__}"
                )

        # --- Validate label ---
        label = entry["label"]
        if not isinstance(label, str) or not label.strip():
            raise ValueError(
                f"Part entry {idx} ({entry['kind']}): "
                "'label' must be a non-empty string"
            )

        kind = PartKind.parse(str(entry["kind"]))
        if kind in catalog:
            raise ValueError(
                f"Part entry {idx}: duplicate entry for kind '{kind.value}'"
            )

        catalog[kind] = PartSpec(
            label=label,
            durability_delta=float(entry["durability_delta"]),
            efficiency_delta=float(entry["efficiency_delta"]),
        )

    missing = [kind.value for kind in PartKind if kind not in catalog]
    if missing:
        raise ValueError(f"Catalog is missing part kinds: {', '.join(missing)}")

    logger.debug("Loaded %d part kinds from %s", len(catalog), catalog_path)
    return catalog
