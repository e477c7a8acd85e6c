from .compare import compare_policies, fault_curve, find_belady_anomalies
from .cursor import TimelineCursor
from .errors import (
    InvalidCapacityError,
    InvalidInputError,
    InvalidPolicyError,
    SimulationError,
)
from .models import SimulationResult, SimulationStep
from .parser import parse, parse_capacity
from .policies import (
    POLICIES,
    FIFOPolicy,
    LRUPolicy,
    OptimalPolicy,
    ReplacementPolicy,
    normalize_policy,
    register_policy,
)
from .simulator import run_simulation, simulate

__all__ = [
    "SimulationStep",
    "SimulationResult",
    "SimulationError",
    "InvalidInputError",
    "InvalidCapacityError",
    "InvalidPolicyError",
    "parse",
    "parse_capacity",
    "simulate",
    "run_simulation",
    "TimelineCursor",
    "POLICIES",
    "ReplacementPolicy",
    "FIFOPolicy",
    "LRUPolicy",
    "OptimalPolicy",
    "normalize_policy",
    "register_policy",
    "compare_policies",
    "fault_curve",
    "find_belady_anomalies",
]
