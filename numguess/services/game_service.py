"""Orchestration of communication from API router to business logic and registry layers (and the reverse direction)."""

import logging
from uuid import UUID

from numguess.api.links import (
    LinkBuilder,
    assemble_collection_links,
    assemble_game_links,
    assemble_root_links,
)
from numguess.api.models import (
    ApiRootResponse,
    DeleteGameRequest,
    GameCreationResponse,
    GamesCollectionResponse,
    GameStateResponse,
    GetGameRequest,
    GuessRequest,
    GuessResultResponse,
)
from numguess.core.exceptions import GameNotFoundError
from numguess.core.models import GameModel
from numguess.core.shared_types import MAX_GUESS, MIN_GUESS, Outcome
from numguess.db.registry import GameRegistry
from numguess.game.game import Game

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for the number guessing game."""

    def __init__(self, registry: GameRegistry) -> None:
        self.registry = registry

    # -- API routes logic ---
    def api_root(self, links: LinkBuilder) -> ApiRootResponse:
        return ApiRootResponse(
            message="Welcome to the Number Guessing Game API",
            links=assemble_root_links(links),
        )

    def list_games(self, links: LinkBuilder) -> GamesCollectionResponse:
        """Collection resource: how many games exist + how to create a new one."""
        return GamesCollectionResponse(
            message="Welcome to the Number Guessing Game! Create a new game to start playing.",
            total_games=self.registry.total_games(),
            best_score=self.registry.get_best_score(),
            links=assemble_collection_links(links),
        )

    def create_new_game(self, links: LinkBuilder) -> GameCreationResponse:
        """Client requested a new game."""
        game = self.registry.create_game()
        snapshot = game.to_model()
        return GameCreationResponse(
            game_id=snapshot.game_id,
            href=links.game_url(snapshot.game_id),
            message="Game created successfully. Submit your first guess!",
            links=assemble_game_links(snapshot, links),
        )

    def get_game_state(
        self, request: GetGameRequest, links: LinkBuilder
    ) -> GameStateResponse:
        """
        Retrieve current game state.
        ----
        The submit-guess link is only part of the response while the game is active.
        """
        snapshot = self.get_game_view(request)
        return GameStateResponse(
            game_id=snapshot.game_id,
            num_guesses=snapshot.num_guesses,
            active=snapshot.active,
            status=snapshot.status,
            last_outcome=snapshot.last_outcome,
            message=self._state_message(snapshot),
            links=assemble_game_links(snapshot, links),
        )

    def submit_guess(
        self, request: GuessRequest, links: LinkBuilder
    ) -> GuessResultResponse:
        """
        Make a guess attempt.
        ----

        1. find the game
        2. let the game compare the guess (raises GameStateError if the game was already won)
        3. on a win, offer the guess count as new best score
        4. build the response from a snapshot taken after the guess
        """
        game = self._fetch_game(request.game_id)
        outcome = game.submit_guess(request.guess)
        snapshot = game.to_model()

        new_best_score = False
        if outcome is Outcome.CORRECT:
            # Guesses after a win are refused, so this count is final.
            new_best_score = self.registry.update_best_score(snapshot.num_guesses)
            logger.info(
                "Game %s won in %d guesses (new best score: %s)",
                snapshot.game_id,
                snapshot.num_guesses,
                new_best_score,
            )
        else:
            logger.debug("Game %s: guess %d was %s", snapshot.game_id, request.guess, outcome)

        return GuessResultResponse(
            game_id=snapshot.game_id,
            guess=request.guess,
            result=outcome,
            message=self._outcome_message(outcome, snapshot.num_guesses),
            num_guesses=snapshot.num_guesses,
            active=snapshot.active,
            best_score=self.registry.get_best_score(),
            new_best_score=new_best_score,
            links=assemble_game_links(snapshot, links),
        )

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.registry.delete_game(request.game_id) is None:
            raise GameNotFoundError(f"Game with game_id={request.game_id} not found.")

    def get_game_view(self, request: GetGameRequest) -> GameModel:
        """Snapshot of a game, used by the HTML pages as well."""
        return self._fetch_game(request.game_id).to_model()

    # -- Internal helpers --
    def _fetch_game(self, game_id: UUID) -> Game:
        """Attempt to find the game in the registry and raise error if it fails."""
        game = self.registry.get_game(game_id)
        if game is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game

    @staticmethod
    def _state_message(snapshot: GameModel) -> str:
        if snapshot.active:
            return f"Please submit your guess between {MIN_GUESS} and {MAX_GUESS}."
        return f"Game complete! You won in {snapshot.num_guesses} guesses."

    @staticmethod
    def _outcome_message(outcome: Outcome, num_guesses: int) -> str:
        if outcome is Outcome.CORRECT:
            return f"Congratulations! You guessed the correct number in {num_guesses} tries!"
        return outcome.message
