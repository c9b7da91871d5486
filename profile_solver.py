#!/usr/bin/env python
"""Profile the gear selection by running random candidate sets multiple times."""
import cProfile
import pstats
import io
import random

from gearsetup.gear import Equipment, EquipmentSlot, bonus_weight, optimal_gear_setup

SLOTS = [slot.value for slot in EquipmentSlot]
WEIGHT = bonus_weight({"strength": 1.0, "accuracy": 0.5})


def random_candidates(rng: random.Random, count: int = 60):
    """Build candidates where roughly a fifth occupy two or three slots."""
    candidates = []
    for i in range(count):
        slot_count = 1 if rng.random() < 0.8 else rng.randint(2, 3)
        slots = rng.sample(SLOTS, slot_count)
        bonuses = {
            "strength": rng.uniform(-5, 40) * slot_count,
            "accuracy": rng.uniform(0, 60) * slot_count,
        }
        candidates.append(Equipment.create(i, f"item {i}", slots, bonuses))
    return candidates


def run_test(rng: random.Random):
    """Run a representative selection."""
    optimal_gear_setup.find(random_candidates(rng), WEIGHT)


def main():
    rng = random.Random(7)
    profiler = cProfile.Profile()
    profiler.enable()

    for _ in range(200):
        run_test(rng)

    profiler.disable()

    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats("cumulative")
    ps.print_stats(40)
    print(s.getvalue())


if __name__ == "__main__":
    main()
