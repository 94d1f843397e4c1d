"""Protocol registry (in-memory for now, any store keeping one live Game per ID fits)"""

from typing import Optional, Protocol
from uuid import UUID

from numguess.game.game import Game


class GameRegistry(Protocol):
    """Keeps track of all games and of the best score across them"""

    def create_game(self) -> Game:
        """Register a brand-new ACTIVE game under a fresh ID."""
        ...

    def get_game(self, game_id: UUID) -> Game | None:
        """Get game by ID, if it exists. Always the same instance for the same ID."""
        ...

    def delete_game(self, game_id: UUID) -> Game | None:
        """Remove a game. Removing an unknown ID is a no-op."""
        ...

    def total_games(self) -> int:
        """Number of games currently registered."""
        ...

    def update_best_score(self, score: int) -> bool:
        """Offer the guess count of a won game. True if it set a new record."""
        ...

    def get_best_score(self) -> Optional[int]:
        """Fewest guesses needed to win so far, None if no game was won yet."""
        ...
