"""Tests for display and report helpers."""

from vehicle_lab.core.part import PART_CATALOG, PartKind, PartSpec
from vehicle_lab.core.report import REPORT_BANNER, display, format_report, report
from vehicle_lab.core.scoring import run_stress_tests
from vehicle_lab.core.vehicle import Vehicle, VehicleKind


def _sample_vehicle() -> Vehicle:
    vehicle = Vehicle(VehicleKind.CAR)
    vehicle.add_part(PartKind.ELECTRIC_ENGINE)
    vehicle.add_part(PartKind.CHASSIS)
    return vehicle


def test_display_matches_vehicle_display() -> None:
    vehicle = _sample_vehicle()
    assert display(vehicle) == ["Car Configuration:", "Electric Engine", "Chassis"]
    assert display(vehicle) == vehicle.display()


def test_report_before_scoring_is_zero() -> None:
    """Reports are lazy: unscored vehicles report the default 0.0."""
    assert report(_sample_vehicle()) == {"durability": 0.0, "efficiency": 0.0}


def test_report_after_scoring() -> None:
    vehicle = _sample_vehicle()
    run_stress_tests(vehicle)
    assert report(vehicle) == {"durability": 105.0, "efficiency": 110.0}


def test_format_report_text() -> None:
    vehicle = _sample_vehicle()
    run_stress_tests(vehicle)
    assert format_report(vehicle) == [
        REPORT_BANNER,
        "Durability Score: 105",
        "Efficiency Score: 110",
    ]


def test_format_report_keeps_fractions() -> None:
    vehicle = Vehicle(VehicleKind.CAR)
    vehicle.set_durability_score(102.5)
    assert format_report(vehicle)[1:] == [
        "Durability Score: 102.5",
        "Efficiency Score: 0",
    ]


def test_display_passes_catalog_through() -> None:
    catalog = dict(PART_CATALOG)
    catalog[PartKind.ELECTRIC_ENGINE] = PartSpec(
        label="Hub Motor", durability_delta=5.0, efficiency_delta=10.0
    )
    assert display(_sample_vehicle(), catalog) == [
        "Car Configuration:",
        "Hub Motor",
        "Chassis",
    ]
