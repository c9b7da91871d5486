from enum import Enum


class EquipmentSlot(Enum):
    """A slot on a character that a piece of equipment can occupy."""

    AMMUNITION = "ammunition"
    BODY = "body"
    CAPE = "cape"
    FEET = "feet"
    HANDS = "hands"
    HEAD = "head"
    LEGS = "legs"
    NECK = "neck"
    RING = "ring"
    SHIELD = "shield"
    WEAPON = "weapon"

    @classmethod
    def parse(cls, value: "str | EquipmentSlot") -> "EquipmentSlot":
        """Parse a slot from its name or value, case-insensitively."""
        if isinstance(value, cls):
            return value
        key = str(value).strip()
        try:
            return cls[key.upper()]
        except KeyError:
            return cls(key.lower())
