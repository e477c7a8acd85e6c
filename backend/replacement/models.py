from dataclasses import dataclass
from typing import Hashable, Optional, Tuple

PageId = Hashable


@dataclass(frozen=True)
class SimulationStep:
    reference_index: int
    page: PageId
    frames: Tuple[PageId, ...]
    page_fault: bool
    evicted: Optional[PageId] = None

    @property
    def hit(self) -> bool:
        return not self.page_fault


@dataclass(frozen=True)
class SimulationResult:
    policy: str
    capacity: int
    references: Tuple[PageId, ...]
    steps: Tuple[SimulationStep, ...]
    page_faults: int
    hit_ratio: float

    @property
    def total_references(self) -> int:
        return len(self.references)

    @property
    def hits(self) -> int:
        return self.total_references - self.page_faults

    @property
    def fault_ratio(self) -> float:
        return self.page_faults / self.total_references
