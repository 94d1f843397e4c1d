"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The live Game stays inside the registry; what crosses layers is a GameModel snapshot taken atomically,
so everything built from it (message, counters, links) describes one and the same state.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from numguess.core.shared_types import Outcome, Status


@dataclass(frozen=True)
class GameModel:
    """Read-only snapshot of a guessing game. The secret is deliberately not part of it."""

    game_id: UUID
    guesses: tuple[int, ...]
    active: bool
    last_outcome: Optional[Outcome]
    created_at: datetime

    @property
    def num_guesses(self) -> int:
        return len(self.guesses)

    @property
    def status(self) -> Status:
        return Status.ACTIVE if self.active else Status.COMPLETE
