from __future__ import annotations

from typing import Protocol, Sequence

from .model import PlacementSession


class PlacementSessionRepository(Protocol):
    def list_for_user(self, user_id: int) -> Sequence[PlacementSession]:
        raise NotImplementedError
