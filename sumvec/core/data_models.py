from dataclasses import dataclass, field
from typing import List

from .config import RESULT_LABEL


@dataclass
class AccumulationStep:
    """One pass of the summation loop."""
    index: int
    value: int
    running_total: int  # sum of every element up to and including index


@dataclass
class SequenceSumResult:
    """Outcome of building a sequence and summing it."""
    sequence: List[int]
    total: int
    steps: List[AccumulationStep] = field(default_factory=list)

    @property
    def element_count(self) -> int:
        return len(self.sequence)

    @property
    def line(self) -> str:
        return f"{RESULT_LABEL} {self.total}"


# Type aliases for commonly used collections
Sequence = List[int]
StepList = List[AccumulationStep]
