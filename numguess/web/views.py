"""
HTML representations for browsers.

Pages only render the forms for links that are present in the assembled link set,
so a won game shows no guess form for the same reason its JSON has no submit-guess link.
"""

from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from numguess.api.links import GameLinks
from numguess.api.models import GamesCollectionResponse
from numguess.core.models import GameModel
from numguess.core.shared_types import MAX_GUESS, MIN_GUESS, Outcome

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)


def render_games_page(
    request: Request, collection: GamesCollectionResponse
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "games.html",
        _context(title="Number Guessing Game", collection=collection),
    )


def render_game_page(request: Request, game: GameModel, links: GameLinks) -> HTMLResponse:
    title = "Number Guessing Game - Active" if game.active else "Number Guessing Game - Complete"
    return templates.TemplateResponse(
        request,
        "game.html",
        _context(title=title, game=game, links=links, message=game_page_message(game)),
    )


def game_page_message(game: GameModel) -> str:
    """What the player sees above the form: feedback on the last guess, or the final result."""
    if not game.active:
        return f"You guessed the correct number in {game.num_guesses} tries!"
    last: Optional[Outcome] = game.last_outcome
    if last is None:
        return f"Please submit your guess between {MIN_GUESS} and {MAX_GUESS}."
    return f"{game.guesses[-1]}: {last.message}"


def _context(**values: object) -> dict[str, object]:
    return {"min_guess": MIN_GUESS, "max_guess": MAX_GUESS, **values}
