"""Presentation helpers for built vehicles.

Reports read the score fields as they stand.  A vehicle that has not
been through the stress tests reports 0.0 for both metrics.
"""

from __future__ import annotations

from collections.abc import Mapping

from vehicle_lab.core.part import PartKind, PartSpec
from vehicle_lab.core.vehicle import Vehicle

REPORT_BANNER: str = "Generating detailed report on durability and efficiency..."


def display(
    vehicle: Vehicle, catalog: Mapping[PartKind, PartSpec] | None = None
) -> list[str]:
    """Return the vehicle's configuration listing."""
    return vehicle.display(catalog)


def report(vehicle: Vehicle) -> dict[str, float]:
    """Return the current durability and efficiency scores."""
    return {
        "durability": vehicle.durability_score,
        "efficiency": vehicle.efficiency_score,
    }


def _format_score(value: float) -> str:
    return f"{value:g}"


def format_report(vehicle: Vehicle) -> list[str]:
    """Return the printable score report for *vehicle*."""
    scores = report(vehicle)
    return [
        REPORT_BANNER,
        f"Durability Score: {_format_score(scores['durability'])}",
        f"Efficiency Score: {_format_score(scores['efficiency'])}",
    ]
