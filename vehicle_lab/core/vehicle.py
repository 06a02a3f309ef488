"""Vehicle model for the vehicle prototype lab.

A vehicle is an ordered collection of parts plus two scores written by
the scoring engine.  The vehicle kind only changes the heading printed
by :meth:`Vehicle.display`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum

from vehicle_lab.core.part import Part, PartKind, PartSpec

logger = logging.getLogger(__name__)


class InvalidVehicleKind(ValueError):
    """Raised when a value does not name a known vehicle kind."""


class VehicleKind(Enum):
    """Closed enumeration of vehicle body types."""

    CAR = "car"
    TRUCK = "truck"
    MOTORCYCLE = "motorcycle"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: VehicleKind | str) -> VehicleKind:
        """Resolve a vehicle kind from an enum member, name or value.

        Raises:
            InvalidVehicleKind: If *value* does not name a vehicle kind.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for kind in cls:
                if key == kind.value:
                    return kind
        raise InvalidVehicleKind(f"Unknown vehicle kind: {value!r}")


class Vehicle:
    """A vehicle under construction.

    Scores default to 0.0 and only change when a scoring pass writes
    them.  Adding parts after a pass leaves the scores stale until the
    vehicle is scored again.

    Attributes:
        kind: Body type, used for the display heading.
        durability_score: Result of the latest durability pass.
        efficiency_score: Result of the latest efficiency pass.
    """

    __slots__ = ("kind", "_parts", "durability_score", "efficiency_score")

    def __init__(self, kind: VehicleKind | str) -> None:
        self.kind: VehicleKind = VehicleKind.parse(kind)
        self._parts: list[Part] = []
        self.durability_score: float = 0.0
        self.efficiency_score: float = 0.0

    @property
    def parts(self) -> tuple[Part, ...]:
        """Read-only view of the parts in insertion order."""
        return tuple(self._parts)

    def add_part(self, part: Part | PartKind | str) -> Part:
        """Append a part to the vehicle.

        Args:
            part: A :class:`Part`, or a part kind to build one from.

        Returns:
            The part that was appended.

        Raises:
            InvalidPartKind: If *part* is a string that names no part kind.
        """
        if not isinstance(part, Part):
            part = Part(PartKind.parse(part))
        self._parts.append(part)
        logger.debug("Added %s to %s", part.label, self.kind.label)
        return part

    def set_durability_score(self, score: float) -> None:
        self.durability_score = float(score)
        logger.debug("%s durability score set to %s", self.kind.label, score)

    def set_efficiency_score(self, score: float) -> None:
        self.efficiency_score = float(score)
        logger.debug("%s efficiency score set to %s", self.kind.label, score)

    def display(
        self, catalog: Mapping[PartKind, PartSpec] | None = None
    ) -> list[str]:
        """Return the configuration heading followed by each part label.

        Args:
            catalog: Optional catalog to take part labels from.
        """
        lines = [f"{self.kind.label} Configuration:"]
        lines.extend(part.describe(catalog) for part in self._parts)
        return lines

    def __len__(self) -> int:
        return len(self._parts)

    def __repr__(self) -> str:
        labels = ", ".join(p.label for p in self._parts)
        return f"Vehicle(kind={self.kind.label!r}, parts=[{labels}])"
