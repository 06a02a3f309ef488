"""Tests for the console session driver."""

from collections.abc import Iterable

from vehicle_lab.core.part import PART_CATALOG, PartKind, PartSpec
from vehicle_lab.core.vehicle import Vehicle, VehicleKind
from vehicle_lab.session import INVALID_CHOICE, PROMPT, VehicleSession

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _Console:
    """Scripted stand-in for stdin/stdout."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = iter(answers)
        self.lines: list[str] = []
        self.prompts: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None

    def print(self, line: str) -> None:
        self.lines.append(line)


def _session(answers: Iterable[str], **kwargs) -> tuple[VehicleSession, _Console]:
    console = _Console(answers)
    return VehicleSession(console.input, console.print, **kwargs), console


# ---------------------------------------------------------------------------
# Main loop
# ---------------------------------------------------------------------------


def test_exit_immediately() -> None:
    session, console = _session(["4"])
    assert session.run() == []
    assert console.lines[0] == "Vehicle Prototype System"
    assert console.lines[-1] == "Exiting..."
    assert console.prompts == [PROMPT]


def test_full_build_transcript() -> None:
    """A truck with two diesel engines and a chassis reproduces the report."""
    session, console = _session(["2", "1", "1", "3", "4", "4"])
    reports = session.run()

    assert reports == [{"durability": 90.0, "efficiency": 80.0}]
    start = console.lines.index("Finished adding parts.") + 1
    assert console.lines[start:start + 14] == [
        "Truck Configuration:",
        "Diesel Engine",
        "Diesel Engine",
        "Chassis",
        "Simulating performance under various conditions...",
        "Performing load test on vehicle...",
        "Performing durability test on vehicle...",
        "Performing efficiency test on vehicle...",
        "Generating detailed report on durability and efficiency...",
        "Durability Score: 90",
        "Efficiency Score: 80",
        "Vehicle Prototype System",
        "1. Create Car",
        "2. Create Truck",
    ]
    assert console.lines[-1] == "Exiting..."


def test_multiple_vehicles_in_one_session() -> None:
    session, _ = _session(["1", "2", "3", "2", "4", "3", "4", "4"])
    reports = session.run()
    assert reports == [
        {"durability": 110.0, "efficiency": 120.0},
        {"durability": 100.0, "efficiency": 100.0},
    ]


def test_invalid_main_menu_input_reprompts() -> None:
    session, console = _session(["9", "car", "", "4"])
    assert session.run() == []
    assert console.lines.count(INVALID_CHOICE) == 3
    assert console.lines.count("Vehicle Prototype System") == 4


def test_invalid_parts_menu_input_reprompts() -> None:
    session, console = _session(["3", "0", "x", "2", "4", "4"])
    reports = session.run()
    assert console.lines.count(INVALID_CHOICE) == 2
    assert "Motorcycle Configuration:" in console.lines
    assert reports == [{"durability": 105.0, "efficiency": 110.0}]


def test_whitespace_around_choices_is_ignored() -> None:
    session, _ = _session([" 1 ", " 2\n", "4 ", "4"])
    assert session.run() == [{"durability": 105.0, "efficiency": 110.0}]


# ---------------------------------------------------------------------------
# End of input
# ---------------------------------------------------------------------------


def test_eof_at_main_menu_exits() -> None:
    session, console = _session([])
    assert session.run() == []
    assert console.lines[-1] == "Exiting..."


def test_eof_while_adding_parts_still_reports() -> None:
    """Closing input mid-build scores the parts added so far, then exits."""
    session, console = _session(["1", "1"])
    reports = session.run()
    assert reports == [{"durability": 95.0, "efficiency": 90.0}]
    assert "Finished adding parts." not in console.lines
    assert console.lines[-1] == "Exiting..."


# ---------------------------------------------------------------------------
# Pieces
# ---------------------------------------------------------------------------


def test_add_parts_appends_in_order() -> None:
    session, _ = _session(["3", "2", "1", "4"])
    vehicle = Vehicle(VehicleKind.CAR)
    assert session.add_parts(vehicle) is True
    assert [p.kind for p in vehicle.parts] == [
        PartKind.CHASSIS,
        PartKind.ELECTRIC_ENGINE,
        PartKind.DIESEL_ENGINE,
    ]


def test_build_uses_session_catalog() -> None:
    catalog = dict(PART_CATALOG)
    catalog[PartKind.CHASSIS] = PartSpec(
        label="Chassis", durability_delta=1.0, efficiency_delta=2.0
    )
    session, console = _session([], catalog=catalog)
    vehicle = Vehicle(VehicleKind.CAR)
    vehicle.add_part(PartKind.CHASSIS)
    assert session.build(vehicle) == {"durability": 101.0, "efficiency": 102.0}
    assert console.lines[-2:] == ["Durability Score: 101", "Efficiency Score: 102"]


def test_relabelled_catalog_reaches_menus_and_listing() -> None:
    """Labels from the session catalog replace the built-in ones."""
    catalog = dict(PART_CATALOG)
    catalog[PartKind.CHASSIS] = PartSpec(
        label="Steel Frame", durability_delta=0.0, efficiency_delta=0.0
    )
    session, console = _session(["1", "3", "4", "4"], catalog=catalog)
    session.run()
    assert "3. Add Steel Frame" in console.lines
    assert "Steel Frame" in console.lines
    assert "Chassis" not in console.lines


def test_default_parts_menu_text() -> None:
    session, console = _session(["4"])
    session.add_parts(Vehicle(VehicleKind.CAR))
    assert console.lines[:5] == [
        "Add Parts",
        "1. Add Diesel Engine",
        "2. Add Electric Engine",
        "3. Add Chassis",
        "4. Done",
    ]
