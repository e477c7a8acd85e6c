from typing import Any, List, Sequence

from .errors import InvalidCapacityError, InvalidInputError
from .models import PageId, SimulationResult, SimulationStep
from .parser import parse, parse_capacity
from .policies import build_policy, normalize_policy


def _check_capacity(capacity: Any) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidCapacityError(f"frame count must be a positive integer, got {capacity!r}")
    if capacity <= 0:
        raise InvalidCapacityError(f"frame count must be >= 1, got {capacity}")
    return capacity


def simulate(sequence: Sequence[PageId], capacity: int, policy: Any) -> SimulationResult:
    """Run one policy over the whole reference sequence.

    All validation happens up front; an invalid call never yields a partial
    timeline. The result only depends on the arguments.
    """
    capacity = _check_capacity(capacity)
    refs = tuple(sequence) if sequence is not None else ()
    if not refs:
        raise InvalidInputError("reference sequence must contain at least one page")
    algo = normalize_policy(policy)

    strategy = build_policy(algo, refs)
    resident: List[PageId] = []
    steps: List[SimulationStep] = []
    faults = 0

    for t, page in enumerate(refs):
        fault = page not in resident
        evicted = None

        if fault:
            faults += 1
            if len(resident) >= capacity:
                evicted = strategy.choose_victim(resident, t)
                resident.remove(evicted)
                strategy.on_evict(evicted)
            resident.append(page)
            strategy.on_load(page, t)

        steps.append(
            SimulationStep(
                reference_index=t,
                page=page,
                frames=tuple(resident),
                page_fault=fault,
                evicted=evicted,
            )
        )
        strategy.on_access(page, t)

    # refs is non-empty here, so the division is safe.
    total = len(refs)
    return SimulationResult(
        policy=algo,
        capacity=capacity,
        references=refs,
        steps=tuple(steps),
        page_faults=faults,
        hit_ratio=(total - faults) / total,
    )


def run_simulation(reference_string: Any, frame_count: Any, policy: Any) -> SimulationResult:
    """Parse raw UI inputs and simulate them."""
    pages = parse(reference_string)
    capacity = parse_capacity(frame_count)
    return simulate(pages, capacity, policy)
