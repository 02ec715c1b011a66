from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Real

from ..model import AttendanceResult


class AttendanceCalculator(ABC):
    """Calculator interface (Strategy Pattern for attendance metrics)."""

    @abstractmethod
    def compute(self, present: int, absent: int, cancelled: int, goal_percentage: Real) -> AttendanceResult:
        raise NotImplementedError
