"""
Tests for the gear selection reduction pipeline.
"""

from itertools import combinations

import pytest
from hypothesis import given, settings, strategies as st

from gearsetup.exceptions import InvalidArgumentError
from gearsetup.gear import Equipment, EquipmentSlot, bonus_weight, optimal_gear_setup


def item(id, name, slots, weight):
    return Equipment.create(id, name, slots, {"weight": weight})


weight_of = bonus_weight({"weight": 1.0})


def is_conflict_free(selection):
    return all(
        a.occupied_slots.isdisjoint(b.occupied_slots)
        for a, b in combinations(selection, 2)
    )


def brute_force_weight(candidates):
    best = 0.0
    for size in range(1, len(candidates) + 1):
        for subset in combinations(candidates, size):
            if is_conflict_free(subset):
                best = max(best, sum(max(weight_of(e), 0.0) for e in subset))
    return best


class TestDominancePruning:
    def test_multi_slot_item_kept_when_heavier(self):
        x = item(1, "X", ["weapon", "shield"], 10)
        y = item(2, "Y", ["weapon"], 6)
        z = item(3, "Z", ["shield"], 3)

        assert optimal_gear_setup.find({x, y, z}, weight_of) == {x}

    def test_multi_slot_item_pruned_when_lighter(self):
        x = item(1, "X", ["weapon", "shield"], 10)
        y = item(2, "Y", ["weapon"], 7)
        z = item(3, "Z", ["shield"], 6)

        assert optimal_gear_setup.find({x, y, z}, weight_of) == {y, z}

    def test_equal_weight_prefers_separate_items(self):
        x = item(1, "X", ["weapon", "shield"], 10)
        y = item(2, "Y", ["weapon"], 5)
        z = item(3, "Z", ["shield"], 5)

        assert optimal_gear_setup.find([x, y, z], weight_of) == {y, z}

    def test_missing_single_slot_counts_as_zero(self):
        x = item(1, "X", ["weapon", "shield"], 10)
        y = item(2, "Y", ["weapon"], 9)

        assert optimal_gear_setup.find([y, x], weight_of) == {x}


class TestReduction:
    def test_non_positive_weights_dropped(self):
        bad = item(1, "cursed ring", ["ring"], -2)
        useless = item(2, "plain cape", ["cape"], 0)
        good = item(3, "amulet", ["neck"], 1)

        assert optimal_gear_setup.find([bad, useless, good], weight_of) == {good}

    def test_everything_dropped(self):
        assert optimal_gear_setup.find([item(1, "a", ["head"], 0)], weight_of) == set()
        assert optimal_gear_setup.find([], weight_of) == set()

    def test_best_item_per_slot(self):
        helmets = [item(i, f"helm {i}", ["head"], i) for i in range(1, 6)]
        boots = [item(10, "boots", ["feet"], 2), item(11, "better boots", ["feet"], 4)]

        result = optimal_gear_setup.find(helmets + boots, weight_of)

        assert result == {helmets[-1], boots[-1]}

    def test_first_seen_wins_equal_weights_in_group(self):
        first = item(1, "first", ["head"], 3)
        second = item(2, "second", ["head"], 3)

        assert optimal_gear_setup.find([first, second], weight_of) == {first}

    def test_overlapping_multi_slot_items_use_general_solver(self):
        # three two-slot items overlapping pairwise plus single-slot fillers
        body_legs = item(1, "platebody and legs", ["body", "legs"], 12)
        legs_feet = item(2, "legs and boots", ["legs", "feet"], 11)
        body = item(3, "body", ["body"], 4)
        legs = item(4, "legs", ["legs"], 4)
        feet = item(5, "feet", ["feet"], 4)

        result = optimal_gear_setup.find(
            [body_legs, legs_feet, body, legs, feet], weight_of
        )

        # body+legs set (12) plus feet (4) beats body (4) plus legs+feet (11)
        assert result == {body_legs, feet}

    def test_weight_evaluated_once_per_candidate(self):
        calls = []

        def weight(e):
            calls.append(e)
            return weight_of(e)

        candidates = [
            item(1, "X", ["weapon", "shield"], 10),
            item(2, "Y", ["weapon"], 6),
            item(3, "Z", ["shield"], 3),
        ]
        optimal_gear_setup.find(candidates, weight)
        assert sorted(e.id for e in calls) == [1, 2, 3]

    def test_custom_slot_accessor(self):
        items = {"two-hander": {"weapon", "shield"}, "sword": {"weapon"}, "kite": {"shield"}}
        weights = {"two-hander": 5, "sword": 3, "kite": 3}

        result = optimal_gear_setup.find(items, weights.get, slots=items.get)

        assert result == {"sword", "kite"}

    def test_missing_weight(self):
        with pytest.raises(InvalidArgumentError):
            optimal_gear_setup.find([item(1, "a", ["head"], 1)], None)


slot_names = [slot.value for slot in EquipmentSlot][:5]


@st.composite
def candidate_sets(draw):
    count = draw(st.integers(min_value=0, max_value=9))
    candidates = []
    for i in range(count):
        slots = draw(st.sets(st.sampled_from(slot_names), min_size=1, max_size=3))
        weight = draw(st.integers(min_value=-3, max_value=15))
        candidates.append(item(i, f"item {i}", sorted(slots), weight))
    return candidates


class TestAgainstBruteForce:
    @given(candidate_sets())
    @settings(max_examples=150, deadline=None)
    def test_optimal_over_all_candidates(self, candidates):
        result = optimal_gear_setup.find(candidates, weight_of)

        assert is_conflict_free(result)
        assert all(weight_of(e) > 0 for e in result)
        assert sum(weight_of(e) for e in result) == brute_force_weight(candidates)


class TestEquipment:
    def test_create_parses_slots(self):
        e = Equipment.create(1, "shield", ["SHIELD"], {"defence": 4})
        assert e.occupied_slots == {EquipmentSlot.SHIELD}
        assert e.bonus("defence") == 4.0
        assert e.bonus("attack") == 0.0
        assert str(e) == "shield"

    def test_requires_a_slot(self):
        with pytest.raises(InvalidArgumentError):
            Equipment.create(1, "nothing", [])

    def test_unknown_slot(self):
        with pytest.raises(ValueError):
            EquipmentSlot.parse("tail")

    def test_bonus_weight_is_linear(self):
        e = Equipment.create(1, "whip", ["weapon"], {"slash": 82, "strength": 82})
        weight = bonus_weight({"slash": 0.5, "strength": 1.0})
        assert weight(e) == pytest.approx(123.0)

    def test_bonuses_take_part_in_equality(self):
        light = item(1, "helm", ["head"], 1)
        heavy = item(1, "helm", ["head"], 9)

        assert light != heavy
        assert len({light, heavy}) == 2
        assert optimal_gear_setup.find([light, heavy], weight_of) == {heavy}

    def test_bonuses_default_to_empty(self):
        first = Equipment.create(1, "plain", ["ring"])
        second = Equipment.create(2, "other", ["ring"])

        assert first.bonuses == second.bonuses == ()
        assert first.bonus("magic") == 0.0
