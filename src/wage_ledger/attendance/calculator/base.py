from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, time


@dataclass(frozen=True)
class TimeWindow:
    name: str
    start: time
    end: time
    points: float


@dataclass(frozen=True)
class WindowScore:
    name: str
    coverage: float
    points: float


class DutyPointCalculator(ABC):
    """Calculator interface (Strategy Pattern for duty points)."""

    @abstractmethod
    def score(self, check_in: datetime, check_out: datetime) -> float:
        raise NotImplementedError
