from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_GOAL_PERCENTAGE


@dataclass(frozen=True)
class Subject:
    subject_id: int
    name: str
    code: Optional[str] = None
    color_code: str = "#6366f1"
    min_attendance_req: float = DEFAULT_GOAL_PERCENTAGE
    credits: int = 0
