"""Stress-test scoring engine for the vehicle prototype lab.

Both metrics are a linear fold over the vehicle's parts:

    score = BASE_SCORE + sum(delta(part.kind) for part in vehicle.parts)

The fold is evaluated as a dot product between the vehicle's part-count
vector and the catalog's delta vector, so the result depends only on
the multiset of part kinds, never on insertion order.

The three named passes are thin aliases: the load and durability tests
both overwrite the durability score, the efficiency test overwrites the
efficiency score.  Each pass is idempotent for an unchanged part set.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import numpy as np
from numpy.typing import NDArray

from vehicle_lab.core.part import PART_CATALOG, PartKind, PartSpec
from vehicle_lab.core.vehicle import Vehicle

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

BASE_SCORE: float = 100.0

_KINDS: tuple[PartKind, ...] = tuple(PartKind)
_KIND_INDEX: dict[PartKind, int] = {kind: i for i, kind in enumerate(_KINDS)}

# ---------------------------------------------------------------------------
# Fold helpers
# ---------------------------------------------------------------------------


def part_counts(vehicle: Vehicle) -> NDArray[np.float64]:
    """Count the vehicle's parts per kind, in ``PartKind`` order."""
    counts = np.zeros(len(_KINDS), dtype=np.float64)
    for part in vehicle.parts:
        counts[_KIND_INDEX[part.kind]] += 1.0
    return counts


def _delta_vector(
    catalog: Mapping[PartKind, PartSpec], attribute: str
) -> NDArray[np.float64]:
    return np.array(
        [getattr(catalog[kind], attribute) for kind in _KINDS], dtype=np.float64
    )


def _fold(
    vehicle: Vehicle,
    catalog: Mapping[PartKind, PartSpec] | None,
    attribute: str,
) -> float:
    table = PART_CATALOG if catalog is None else catalog
    deltas = _delta_vector(table, attribute)
    return BASE_SCORE + float(part_counts(vehicle) @ deltas)


def compute_durability(
    vehicle: Vehicle, catalog: Mapping[PartKind, PartSpec] | None = None
) -> float:
    """Return the durability score for the vehicle's current parts.

    Args:
        vehicle: Vehicle to score.  Not modified.
        catalog: Optional contribution table.  Defaults to
            :data:`PART_CATALOG`.

    Returns:
        ``BASE_SCORE`` plus the durability delta of every part.
    """
    return _fold(vehicle, catalog, "durability_delta")


def compute_efficiency(
    vehicle: Vehicle, catalog: Mapping[PartKind, PartSpec] | None = None
) -> float:
    """Return the efficiency score for the vehicle's current parts.

    Args:
        vehicle: Vehicle to score.  Not modified.
        catalog: Optional contribution table.  Defaults to
            :data:`PART_CATALOG`.

    Returns:
        ``BASE_SCORE`` plus the efficiency delta of every part.
    """
    return _fold(vehicle, catalog, "efficiency_delta")


# ---------------------------------------------------------------------------
# Stress-test passes
# ---------------------------------------------------------------------------


def run_load_test(
    vehicle: Vehicle, catalog: Mapping[PartKind, PartSpec] | None = None
) -> None:
    """Run the load test, overwriting the vehicle's durability score."""
    logger.info("Load test on %s parts=%d", vehicle.kind.label, len(vehicle))
    vehicle.set_durability_score(compute_durability(vehicle, catalog))


def run_durability_test(
    vehicle: Vehicle, catalog: Mapping[PartKind, PartSpec] | None = None
) -> None:
    """Run the durability test, overwriting the vehicle's durability score."""
    logger.info(
        "Durability test on %s parts=%d", vehicle.kind.label, len(vehicle)
    )
    vehicle.set_durability_score(compute_durability(vehicle, catalog))


def run_efficiency_test(
    vehicle: Vehicle, catalog: Mapping[PartKind, PartSpec] | None = None
) -> None:
    """Run the efficiency test, overwriting the vehicle's efficiency score."""
    logger.info(
        "Efficiency test on %s parts=%d", vehicle.kind.label, len(vehicle)
    )
    vehicle.set_efficiency_score(compute_efficiency(vehicle, catalog))


def run_stress_tests(
    vehicle: Vehicle, catalog: Mapping[PartKind, PartSpec] | None = None
) -> None:
    """Run the load, durability and efficiency tests in that order."""
    run_load_test(vehicle, catalog)
    run_durability_test(vehicle, catalog)
    run_efficiency_test(vehicle, catalog)
