from __future__ import annotations

import logging
from functools import lru_cache
from numbers import Real
from typing import Optional

from ...core.constants import DEFAULT_CACHE_SIZE
from ..model import AttendanceResult
from .base import AttendanceCalculator
from .standard_calculator import StandardAttendanceCalculator

logger = logging.getLogger(__name__)


class MemoizedAttendanceCalculator(AttendanceCalculator):
    """Caches results of another calculator keyed on the input tuple.

    Results are frozen dataclasses, so handing the same instance to several
    callers is safe. Inputs that fail validation are not cached; unhashable
    inputs skip the cache and reach the inner calculator's validation.
    """

    def __init__(self, inner: Optional[AttendanceCalculator] = None, *, maxsize: int = DEFAULT_CACHE_SIZE):
        self._inner = inner or StandardAttendanceCalculator()
        self._cached = lru_cache(maxsize=maxsize, typed=True)(self._inner.compute)
        logger.debug("memoizing %s (maxsize=%s)", type(self._inner).__name__, maxsize)

    def compute(self, present: int, absent: int, cancelled: int, goal_percentage: Real) -> AttendanceResult:
        try:
            hash((present, absent, cancelled, goal_percentage))
        except TypeError:
            return self._inner.compute(present, absent, cancelled, goal_percentage)
        return self._cached(present, absent, cancelled, goal_percentage)

    def cache_info(self):
        return self._cached.cache_info()

    def cache_clear(self) -> None:
        self._cached.cache_clear()
