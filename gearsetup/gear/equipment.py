"""Minimal equipment value object and weight helpers for gear selection."""

from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Mapping, Optional, Tuple, Union

from gearsetup.exceptions import InvalidArgumentError
from gearsetup.gear.slots import EquipmentSlot


@dataclass(frozen=True)
class Equipment:
    """
    A piece of equipment that can be worn.

    Only ``occupied_slots`` matters to the selection engine; ``bonuses`` is
    what weight functions usually read. Instances are hashable so they can be
    used directly as graph vertices; equality covers every field, bonuses
    included, so two variants of one item are distinct candidates.
    """

    id: int
    name: str
    occupied_slots: FrozenSet[EquipmentSlot]
    bonuses: Tuple[Tuple[str, float], ...] = ()

    @classmethod
    def create(
        cls,
        id: int,
        name: str,
        slots: Iterable[Union[str, EquipmentSlot]],
        bonuses: Optional[Mapping[str, float]] = None,
    ) -> "Equipment":
        """Build an Equipment from loosely typed slots and a bonus mapping."""
        occupied = frozenset(EquipmentSlot.parse(s) for s in slots)
        if not occupied:
            raise InvalidArgumentError(f"{name} must occupy at least one slot.")
        return cls(
            id=id,
            name=name,
            occupied_slots=occupied,
            bonuses=tuple(sorted((k, float(v)) for k, v in (bonuses or {}).items())),
        )

    def bonus(self, name: str) -> float:
        """Return the named bonus, 0.0 when the equipment does not have it."""
        for key, value in self.bonuses:
            if key == name:
                return value
        return 0.0

    def __str__(self) -> str:
        return self.name


def bonus_weight(coefficients: Mapping[str, float]) -> Callable[[Equipment], float]:
    """
    Build a linear weight function over equipment bonuses.

    Example: ``weight = bonus_weight({"strength": 1.0, "accuracy": 0.5})``
    """
    terms = tuple(coefficients.items())

    def weight(equipment: Equipment) -> float:
        return sum(c * equipment.bonus(name) for name, c in terms)

    return weight
