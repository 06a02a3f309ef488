"""Console session driver for the vehicle prototype lab.

Presents the main and parts menus, builds vehicles from the user's
choices, runs the stress tests and prints the report.  Input and output
go through injectable callables so a session can be scripted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from vehicle_lab.core.part import PART_CATALOG, PartKind, PartSpec
from vehicle_lab.core.report import format_report, report
from vehicle_lab.core.scoring import (
    run_durability_test,
    run_efficiency_test,
    run_load_test,
)
from vehicle_lab.core.vehicle import Vehicle, VehicleKind

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Menu text
# ---------------------------------------------------------------------------

PROMPT: str = "Enter your choice: "
INVALID_CHOICE: str = "Invalid choice. Please try again."
SIMULATION_BANNER: str = "Simulating performance under various conditions..."

_MAIN_MENU: tuple[str, ...] = (
    "Vehicle Prototype System",
    "1. Create Car",
    "2. Create Truck",
    "3. Create Motorcycle",
    "4. Exit",
)
_VEHICLE_CHOICES: dict[str, VehicleKind] = {
    "1": VehicleKind.CAR,
    "2": VehicleKind.TRUCK,
    "3": VehicleKind.MOTORCYCLE,
}
_EXIT_CHOICE: str = "4"

_PART_CHOICES: dict[str, PartKind] = {
    "1": PartKind.DIESEL_ENGINE,
    "2": PartKind.ELECTRIC_ENGINE,
    "3": PartKind.CHASSIS,
}
_DONE_CHOICE: str = "4"


class VehicleSession:
    """Interactive build-score-report loop.

    Attributes:
        catalog: Optional part catalog used for labels and every scoring
            pass.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], object] = print,
        catalog: Mapping[PartKind, PartSpec] | None = None,
    ) -> None:
        self._input = input_fn
        self._output = output_fn
        self.catalog = catalog

    def _print_lines(self, lines: tuple[str, ...] | list[str]) -> None:
        for line in lines:
            self._output(line)

    def _parts_menu(self) -> list[str]:
        table = PART_CATALOG if self.catalog is None else self.catalog
        lines = ["Add Parts"]
        for choice, kind in _PART_CHOICES.items():
            lines.append(f"{choice}. Add {table[kind].label}")
        lines.append(f"{_DONE_CHOICE}. Done")
        return lines

    def _read_choice(self) -> str:
        return self._input(PROMPT).strip()

    def run(self) -> list[dict[str, float]]:
        """Run the main menu until the user exits or input ends.

        Returns:
            The score report of every vehicle built in this session.
        """
        reports: list[dict[str, float]] = []
        while True:
            self._print_lines(_MAIN_MENU)
            try:
                choice = self._read_choice()
            except EOFError:
                logger.debug("Input closed at main menu")
                self._output("Exiting...")
                return reports

            if choice == _EXIT_CHOICE:
                self._output("Exiting...")
                return reports

            kind = _VEHICLE_CHOICES.get(choice)
            if kind is None:
                logger.debug("Rejected main menu input %r", choice)
                self._output(INVALID_CHOICE)
                continue

            vehicle = Vehicle(kind)
            finished = self.add_parts(vehicle)
            reports.append(self.build(vehicle))
            if not finished:
                self._output("Exiting...")
                return reports

    def add_parts(self, vehicle: Vehicle) -> bool:
        """Prompt for parts until the user is done.

        Returns:
            ``True`` if the user chose Done, ``False`` if input ended.
        """
        while True:
            self._print_lines(self._parts_menu())
            try:
                choice = self._read_choice()
            except EOFError:
                logger.debug("Input closed at parts menu")
                return False

            if choice == _DONE_CHOICE:
                self._output("Finished adding parts.")
                return True

            part_kind = _PART_CHOICES.get(choice)
            if part_kind is None:
                logger.debug("Rejected parts menu input %r", choice)
                self._output(INVALID_CHOICE)
                continue
            vehicle.add_part(part_kind)

    def build(self, vehicle: Vehicle) -> dict[str, float]:
        """Display, simulate, stress-test and report on *vehicle*."""
        self._print_lines(vehicle.display(self.catalog))
        self._output(SIMULATION_BANNER)

        self._output("Performing load test on vehicle...")
        run_load_test(vehicle, self.catalog)
        self._output("Performing durability test on vehicle...")
        run_durability_test(vehicle, self.catalog)
        self._output("Performing efficiency test on vehicle...")
        run_efficiency_test(vehicle, self.catalog)

        self._print_lines(format_report(vehicle))
        return report(vehicle)
