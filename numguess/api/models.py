"""Requests and Response models"""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from numguess.api.links import CollectionLinks, GameLinks, RootLinks
from numguess.core.exceptions import InvalidRequestError
from numguess.core.shared_types import MAX_GUESS, MIN_GUESS, Outcome, Status


# --- REQUEST MODELS ---
class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


class GuessRequest(BaseModel):
    game_id: UUID
    guess: int

    @field_validator("guess", mode="before")
    @classmethod
    def validate_guess(cls, value: Any) -> int:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise InvalidRequestError("Missing guess: must be between 1 and 100")

        # bool is an int subclass, but True is not a guess
        if isinstance(value, bool):
            raise InvalidRequestError(f"Cannot interpret {value!r} as a guess.")
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise InvalidRequestError(f"Cannot interpret {value!r} as a guess.") from None
        if isinstance(value, float) and number != value:
            raise InvalidRequestError(f"Cannot interpret {value!r} as a guess.")

        if not MIN_GUESS <= number <= MAX_GUESS:
            raise InvalidRequestError(
                f"Invalid guess: must be between {MIN_GUESS} and {MAX_GUESS}"
            )
        return number


# --- RESPONSE MODELS ---
class _Response(BaseModel):
    """JSON keys are camelCase and the hypermedia controls live under `_links`."""

    model_config = ConfigDict(populate_by_name=True)


class GameCreationResponse(_Response):
    game_id: UUID = Field(alias="gameId")
    href: str
    message: str
    links: GameLinks = Field(alias="_links")


class GameStateResponse(_Response):
    game_id: UUID = Field(alias="gameId")
    num_guesses: int = Field(alias="numGuesses")
    active: bool
    status: Status
    last_outcome: Optional[Outcome] = Field(alias="lastOutcome")
    message: str
    links: GameLinks = Field(alias="_links")


class GuessResultResponse(_Response):
    game_id: UUID = Field(alias="gameId")
    guess: int
    result: Outcome
    message: str
    num_guesses: int = Field(alias="numGuesses")
    active: bool
    best_score: Optional[int] = Field(alias="bestScore")
    new_best_score: bool = Field(alias="newBestScore")
    links: GameLinks = Field(alias="_links")


class GamesCollectionResponse(_Response):
    message: str
    total_games: int = Field(alias="totalGames")
    best_score: Optional[int] = Field(alias="bestScore")
    links: CollectionLinks = Field(alias="_links")


class ApiRootResponse(_Response):
    message: str
    links: RootLinks = Field(alias="_links")


class ErrorResponse(BaseModel):
    error: str
    status: int
