from .slots import EquipmentSlot
from .equipment import Equipment, bonus_weight
from . import optimal_gear_setup

__all__ = ["EquipmentSlot", "Equipment", "bonus_weight", "optimal_gear_setup"]
