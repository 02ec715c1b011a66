from __future__ import annotations

from typing import Protocol, Sequence

from .model import Subject


class SubjectRepository(Protocol):
    def list_for_user(self, user_id: int) -> Sequence[Subject]:
        raise NotImplementedError
