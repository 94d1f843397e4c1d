"""
The Game class is the entrypoint into the domain layer for the service layer.
It owns the secret number, the guess history and the ACTIVE -> COMPLETE transition,
and is the single source of truth for whether another guess is a legal next action.
"""

import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Optional, Self
from uuid import UUID

from numguess.core.exceptions import GameStateError
from numguess.core.models import GameModel
from numguess.core.shared_types import MAX_GUESS, MIN_GUESS, Outcome, Status

# One generator for the whole process. SystemRandom draws from the OS entropy pool:
# no seeding, and concurrent draws from near-simultaneous game creations are independent.
_SECRET_RNG = random.SystemRandom()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def compare(guess: int, secret: int) -> Outcome:
    """Three-way comparison of a guess against the secret."""
    if guess == secret:
        return Outcome.CORRECT
    if guess < secret:
        return Outcome.TOO_LOW
    return Outcome.TOO_HIGH


@dataclass(eq=False)
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    game_id: UUID
    secret: int = field(repr=False)
    guesses: list[int] = field(default_factory=list)
    active: bool = True
    created_at: datetime = field(default_factory=utc_now)
    _lock: Lock = field(default_factory=Lock, init=False, repr=False)

    @classmethod
    def new_game(
        cls,
        game_id: UUID,
        rng: Optional[random.Random] = None,
        secret: Optional[int] = None,
    ) -> Self:
        """
        Start a new game in the ACTIVE state with an empty history.

        ----
        `rng` and `secret` only exist so tests can pin down the secret number.
        """
        if secret is None:
            secret = (rng or _SECRET_RNG).randint(MIN_GUESS, MAX_GUESS)
        return cls(game_id=game_id, secret=secret)

    @property
    def status(self) -> Status:
        return Status.ACTIVE if self.active else Status.COMPLETE

    @property
    def num_guesses(self) -> int:
        return len(self.guesses)

    def submit_guess(self, value: int) -> Outcome:
        """
        Record a guess and report how it compares to the secret.
        ----

        Any integer is accepted here; range checks belong to the boundary layer.
        Guessing again after the game is won is refused, history stays untouched in that case.
        Appending the guess and flipping the active flag happen in one critical section.
        """
        with self._lock:
            if not self.active:
                raise GameStateError(
                    f"Game {self.game_id} is already complete. status: {self.status}"
                )
            self.guesses.append(value)
            outcome = compare(value, self.secret)
            if outcome is Outcome.CORRECT:
                self.active = False
            return outcome

    def last_outcome(self) -> Optional[Outcome]:
        """Outcome of the most recent guess, derived from history. None if nothing was guessed yet."""
        with self._lock:
            return self._last_outcome()

    def to_model(self) -> GameModel:
        """Encode into a consistent snapshot the Service layer uses"""
        with self._lock:
            return GameModel(
                game_id=self.game_id,
                guesses=tuple(self.guesses),
                active=self.active,
                last_outcome=self._last_outcome(),
                created_at=self.created_at,
            )

    # --- Internal helpers ---
    def _last_outcome(self) -> Optional[Outcome]:
        if not self.guesses:
            return None
        return compare(self.guesses[-1], self.secret)
