"""Implementation of (Game)Registry keeping everything in process memory"""

import logging
import random
from threading import Lock
from typing import Optional
from uuid import UUID, uuid4

from numguess.core.atomic import AtomicReference
from numguess.game.game import Game

logger = logging.getLogger(__name__)


class InMemoryGameRegistry:
    """Games stored in a dict guarded by a lock. Lost when the process stops."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._games: dict[UUID, Game] = {}
        self._lock = Lock()
        self._best_score: AtomicReference[Optional[int]] = AtomicReference(None)
        self._rng = rng

    def create_game(self) -> Game:
        """Register a brand-new ACTIVE game under a fresh ID."""
        with self._lock:
            game_id = uuid4()
            while game_id in self._games:
                game_id = uuid4()
            game = Game.new_game(game_id, rng=self._rng)
            self._games[game_id] = game
        logger.info("Created game %s", game_id)
        return game

    def get_game(self, game_id: UUID) -> Game | None:
        """Get game by ID, if it exists."""
        with self._lock:
            return self._games.get(game_id)

    def delete_game(self, game_id: UUID) -> Game | None:
        """Remove a game's record. Unknown IDs are ignored."""
        with self._lock:
            game = self._games.pop(game_id, None)
        if game is not None:
            logger.info("Deleted game %s", game_id)
        return game

    def total_games(self) -> int:
        with self._lock:
            return len(self._games)

    def update_best_score(self, score: int) -> bool:
        """
        Lower the best score to `score` if it beats the current one (ties do not count).

        ---
        Compare-and-set loop: re-read, compute the candidate minimum, try to swap, retry if another winner got in between.
        Only the caller whose swap installed its own score gets True.
        """
        while True:
            current = self._best_score.get()
            if current is not None and score >= current:
                return False
            if self._best_score.compare_and_set(current, score):
                logger.info("New best score: %d (was %s)", score, current)
                return True

    def get_best_score(self) -> Optional[int]:
        return self._best_score.get()

    def clear(self) -> None:
        """Forget all games and the best score (useful in between tests)"""
        with self._lock:
            self._games.clear()
        self._best_score = AtomicReference(None)
