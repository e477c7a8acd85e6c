"""Replacement strategies.

Each policy is fed by the simulator through the same hooks:

    on_load(page, t)     a faulting page was appended to the resident list
    on_access(page, t)   page was referenced at index t (hit or fault)
    on_evict(page)       page left the resident list
    choose_victim(resident, t)

``resident`` is the simulator's list in load order. Policies never mutate it.
"""
from __future__ import annotations

from bisect import bisect_right
from collections import defaultdict, deque
from typing import Any, Deque, Dict, List, Sequence, Type

from .errors import InvalidPolicyError
from .models import PageId

POLICY_ALIASES = {"OPT": "OPTIMAL", "MIN": "OPTIMAL", "BELADY": "OPTIMAL"}


class ReplacementPolicy:
    name = ""

    def __init__(self, references: Sequence[PageId]):
        self.references = references

    def on_load(self, page: PageId, t: int) -> None:
        pass

    def on_access(self, page: PageId, t: int) -> None:
        pass

    def on_evict(self, page: PageId) -> None:
        pass

    def choose_victim(self, resident: List[PageId], t: int) -> PageId:
        raise NotImplementedError


POLICIES: Dict[str, Type[ReplacementPolicy]] = {}


def register_policy(cls: Type[ReplacementPolicy]) -> Type[ReplacementPolicy]:
    POLICIES[cls.name] = cls
    return cls


def normalize_policy(value: Any) -> str:
    name = str(value or "").strip().upper()
    name = POLICY_ALIASES.get(name, name)
    if name not in POLICIES:
        known = ", ".join(POLICIES)
        raise InvalidPolicyError(f"unknown policy {value!r}; expected one of {known}")
    return name


def build_policy(name: Any, references: Sequence[PageId]) -> ReplacementPolicy:
    return POLICIES[normalize_policy(name)](references)


@register_policy
class FIFOPolicy(ReplacementPolicy):
    """Evict the page that was loaded first. Hits never reorder the queue."""

    name = "FIFO"

    def __init__(self, references: Sequence[PageId]):
        super().__init__(references)
        self.queue: Deque[PageId] = deque()

    def on_load(self, page: PageId, t: int) -> None:
        self.queue.append(page)

    def on_evict(self, page: PageId) -> None:
        if page in self.queue:
            self.queue.remove(page)

    def choose_victim(self, resident: List[PageId], t: int) -> PageId:
        return self.queue[0] if self.queue else resident[0]


@register_policy
class LRUPolicy(ReplacementPolicy):
    """Evict the resident page with the oldest last-reference index.

    Every reference gets a distinct index, so two resident pages never share a
    timestamp; the scan keeps the first minimum in resident order anyway.
    """

    name = "LRU"

    def __init__(self, references: Sequence[PageId]):
        super().__init__(references)
        self.last_used: Dict[PageId, int] = {}

    def on_access(self, page: PageId, t: int) -> None:
        self.last_used[page] = t

    def on_evict(self, page: PageId) -> None:
        self.last_used.pop(page, None)

    def choose_victim(self, resident: List[PageId], t: int) -> PageId:
        victim = resident[0]
        oldest = self.last_used.get(victim, -1)
        for page in resident[1:]:
            stamp = self.last_used.get(page, -1)
            if stamp < oldest:
                victim = page
                oldest = stamp
        return victim


@register_policy
class OptimalPolicy(ReplacementPolicy):
    """Belady's MIN: evict the page whose next use lies furthest ahead.

    A page that is never referenced again wins outright; the first such page
    in resident order is taken.
    """

    name = "OPTIMAL"

    def __init__(self, references: Sequence[PageId]):
        super().__init__(references)
        self.positions: Dict[PageId, List[int]] = defaultdict(list)
        for idx, page in enumerate(references):
            self.positions[page].append(idx)

    def next_use(self, page: PageId, t: int) -> float:
        upcoming = self.positions.get(page, [])
        pos = bisect_right(upcoming, t)
        return upcoming[pos] if pos < len(upcoming) else float("inf")

    def choose_victim(self, resident: List[PageId], t: int) -> PageId:
        victim = resident[0]
        farthest = -1.0
        for page in resident:
            upcoming = self.next_use(page, t)
            if upcoming == float("inf"):
                return page
            if upcoming > farthest:
                farthest = upcoming
                victim = page
        return victim
