"""
Selection of the best conflict-free set of equipment.

Candidates are reduced before the general solver runs:

1. Candidates with a weight <= 0 are dropped, wearing nothing is never worse.
2. Candidates occupying exactly the same slots are grouped, only the heaviest
   of each group is kept.
3. A multi-slot candidate is dropped when the best single-slot candidates for
   each of its slots weigh at least as much in total.

What remains goes through :func:`gearsetup.solvers.mwis.find` with "occupied
slots intersect" as the conflict, unless the reduction already settled it.
"""

from operator import attrgetter
from typing import (
    Any,
    Callable,
    Collection,
    Dict,
    FrozenSet,
    Hashable,
    Iterable,
    List,
    Optional,
    Set,
    TypeVar,
)

from gearsetup.config import SolverConfig
from gearsetup.exceptions import require_callable, require_collection
from gearsetup.logger import gs_logger, format_set, format_vertex, format_weight
from gearsetup.solvers import mwis

T = TypeVar("T", bound=Hashable)

occupied_slots: Callable[[Any], Collection[Any]] = attrgetter("occupied_slots")


@gs_logger.log_execution
def find(
    candidates: Iterable[T],
    weight: Callable[[T], float],
    slots: Optional[Callable[[T], Collection[Any]]] = None,
    config: Optional[SolverConfig] = None,
) -> Set[T]:
    """
    Find the heaviest set of candidates where no two candidates share a slot.

    Args:
        candidates: The equipment to choose from.
        weight: The weight of a candidate. Evaluated once per candidate.
        slots: Returns the slots a candidate occupies, defaults to its
            ``occupied_slots`` attribute.
        config: Solver settings forwarded to the general solver.

    Returns:
        Set[T]: A conflict-free selection of maximal total weight.
    """
    require_collection(candidates, "candidates")
    require_callable(weight, "weight")
    slots_of = occupied_slots if slots is None else require_callable(slots, "slots")

    items: List[T] = list(dict.fromkeys(candidates))
    weights: Dict[T, float] = {item: float(weight(item)) for item in items}
    slot_sets: Dict[T, FrozenSet[Any]] = {
        item: frozenset(slots_of(item)) for item in items
    }

    best_by_slots = _best_per_slot_set(items, weights, slot_sets)
    gs_logger.log_reduction("Positive weight, best per slot set", len(items), len(best_by_slots))

    considered = [
        item
        for item in best_by_slots.values()
        if not _is_dominated(item, weights, slot_sets, best_by_slots)
    ]
    gs_logger.log_reduction("Dominated multi-slot items", len(best_by_slots), len(considered))

    if not gs_logger.disabled:
        gs_logger.table(
            [
                [format_vertex(item), format_set(slot_sets[item]), format_weight(weights[item])]
                for item in considered
            ],
            headers=["item", "slots", "weight"],
            title="Considered candidates",
        )

    # zero or one candidate left, nothing to choose between
    if len(considered) < 2:
        return set(considered)

    # one winner per slot, pairwise disjoint
    if all(len(slot_sets[item]) == 1 for item in considered):
        return set(considered)

    return mwis.find(
        considered,
        lambda left, right: not slot_sets[left].isdisjoint(slot_sets[right]),
        weights.__getitem__,
        config,
    )


def _best_per_slot_set(
    items: List[T],
    weights: Dict[T, float],
    slot_sets: Dict[T, FrozenSet[Any]],
) -> Dict[FrozenSet[Any], T]:
    """Map every occupied slot set to its heaviest positive-weight item."""
    best: Dict[FrozenSet[Any], T] = {}
    for item in items:
        item_weight = weights[item]
        if item_weight <= 0:
            continue
        occupied = slot_sets[item]
        previous = best.get(occupied)
        if previous is None or item_weight > weights[previous]:
            best[occupied] = item
    return best


def _is_dominated(
    item: T,
    weights: Dict[T, float],
    slot_sets: Dict[T, FrozenSet[Any]],
    best_by_slots: Dict[FrozenSet[Any], T],
) -> bool:
    """Return True if separate single-slot items are at least as heavy as ``item``."""
    occupied = slot_sets[item]
    if len(occupied) < 2:
        return False
    separate_weight = 0.0
    for slot in occupied:
        single = best_by_slots.get(frozenset((slot,)))
        if single is not None:
            separate_weight += weights[single]
    return separate_weight >= weights[item]
