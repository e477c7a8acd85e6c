from typing import Dict, Iterable, List, Sequence, Tuple

from .errors import InvalidCapacityError
from .models import PageId, SimulationResult
from .policies import POLICIES
from .simulator import simulate


def compare_policies(sequence: Sequence[PageId], capacity: int) -> List[SimulationResult]:
    """Run every registered policy on the same input, in registry order."""
    return [simulate(sequence, capacity, name) for name in POLICIES]


def fault_curve(sequence: Sequence[PageId], policy: str, capacities: Iterable[int]) -> Dict[int, int]:
    return {capacity: simulate(sequence, capacity, policy).page_faults for capacity in capacities}


def find_belady_anomalies(
    sequence: Sequence[PageId],
    max_capacity: int,
    policy: str = "FIFO",
) -> List[Tuple[int, int, int]]:
    """Return (capacity, faults, faults_with_one_more_frame) where the extra frame hurt."""
    if max_capacity < 2:
        raise InvalidCapacityError("max_capacity must be >= 2 to compare neighbouring capacities")

    curve = fault_curve(sequence, policy, range(1, max_capacity + 1))
    anomalies = []
    for capacity in range(1, max_capacity):
        if curve[capacity + 1] > curve[capacity]:
            anomalies.append((capacity, curve[capacity], curve[capacity + 1]))
    return anomalies
