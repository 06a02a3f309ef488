"""Part catalog for the vehicle prototype lab.

Every part belongs to one of a closed set of kinds.  The kind fixes the
part's label and its contribution to the durability and efficiency
scores; ``PART_CATALOG`` is the single table holding both.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum


class InvalidPartKind(ValueError):
    """Raised when a value does not name a known part kind."""


class PartKind(Enum):
    """Closed enumeration of the part variants a vehicle can carry."""

    DIESEL_ENGINE = "diesel_engine"
    ELECTRIC_ENGINE = "electric_engine"
    CHASSIS = "chassis"

    @classmethod
    def parse(cls, value: PartKind | str) -> PartKind:
        """Resolve a part kind from an enum member, name or value.

        Names are matched case-insensitively and treat ``-`` and spaces
        as ``_``, so ``"Diesel Engine"`` and ``"diesel-engine"`` both
        resolve to :attr:`DIESEL_ENGINE`.

        Raises:
            InvalidPartKind: If *value* does not name a part kind.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().replace("-", "_").replace(" ", "_").lower()
            for kind in cls:
                if key == kind.value:
                    return kind
        raise InvalidPartKind(f"Unknown part kind: {value!r}")


@dataclass(frozen=True)
class PartSpec:
    """Catalog entry for one part kind.

    Attributes:
        label: Human-readable description shown in vehicle listings.
        durability_delta: Additive contribution to the durability score.
        efficiency_delta: Additive contribution to the efficiency score.
    """

    label: str
    durability_delta: float
    efficiency_delta: float

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("label must not be empty.")


PART_CATALOG: dict[PartKind, PartSpec] = {
    PartKind.DIESEL_ENGINE: PartSpec(
        label="Diesel Engine", durability_delta=-5.0, efficiency_delta=-10.0
    ),
    PartKind.ELECTRIC_ENGINE: PartSpec(
        label="Electric Engine", durability_delta=5.0, efficiency_delta=10.0
    ),
    PartKind.CHASSIS: PartSpec(
        label="Chassis", durability_delta=0.0, efficiency_delta=0.0
    ),
}


@dataclass(frozen=True)
class Part:
    """Immutable vehicle part.

    Attributes:
        kind: The catalog variant of this part.
    """

    kind: PartKind

    def __post_init__(self) -> None:
        if not isinstance(self.kind, PartKind):
            raise InvalidPartKind(f"Unknown part kind: {self.kind!r}")

    @property
    def label(self) -> str:
        return PART_CATALOG[self.kind].label

    def describe(self, catalog: Mapping[PartKind, PartSpec] | None = None) -> str:
        """Return the label for this part's kind.

        Args:
            catalog: Optional catalog to take the label from.  Defaults
                to :data:`PART_CATALOG`.
        """
        table = PART_CATALOG if catalog is None else catalog
        return table[self.kind].label
