"""Core model and scoring modules for the vehicle prototype lab."""

from vehicle_lab.core.part import (
    PART_CATALOG,
    InvalidPartKind,
    Part,
    PartKind,
    PartSpec,
)
from vehicle_lab.core.report import display, format_report, report
from vehicle_lab.core.scoring import (
    BASE_SCORE,
    compute_durability,
    compute_efficiency,
    part_counts,
    run_durability_test,
    run_efficiency_test,
    run_load_test,
    run_stress_tests,
)
from vehicle_lab.core.vehicle import InvalidVehicleKind, Vehicle, VehicleKind

__all__ = [
    "BASE_SCORE",
    "InvalidPartKind",
    "InvalidVehicleKind",
    "PART_CATALOG",
    "Part",
    "PartKind",
    "PartSpec",
    "Vehicle",
    "VehicleKind",
    "compute_durability",
    "compute_efficiency",
    "display",
    "format_report",
    "part_counts",
    "report",
    "run_durability_test",
    "run_efficiency_test",
    "run_load_test",
    "run_stress_tests",
]
