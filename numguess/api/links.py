"""
Hypermedia controls.

LinkBuilder knows how to point at each resource; the assemble_* functions decide which links a representation carries.
assemble_game_links() is the only place deciding a conditional link: `submit-guess` is there if and only if the game is active.
Clients never need to know the rule "won game -> no more guessing", they just see the link disappear.
"""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from numguess.core.models import GameModel
from numguess.core.shared_types import LinkMethod, MediaType


class _OmitAbsent(BaseModel):
    """Optional members left unset are dropped from the output instead of being rendered as null."""

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def _drop_none(self, handler: Any) -> dict[str, Any]:
        return {key: value for key, value in handler(self).items() if value is not None}


class Link(_OmitAbsent):
    href: str
    method: LinkMethod
    type: Optional[str] = None
    title: Optional[str] = None
    templated: bool = False


# Relation names are hyphenated on the wire, hence the aliases. Dump with by_alias=True.
class GameLinks(_OmitAbsent):
    self_link: Link = Field(alias="self")
    submit_guess: Optional[Link] = Field(default=None, alias="submit-guess")
    delete: Link
    new_game: Link = Field(alias="new-game")
    games: Link


class CollectionLinks(_OmitAbsent):
    self_link: Link = Field(alias="self")
    create_game: Link = Field(alias="create-game")
    root: Link


class RootLinks(_OmitAbsent):
    self_link: Link = Field(alias="self")
    games: Link


class LinkBuilder:
    """Build absolute links relative to the base URL the current request came in on."""

    def __init__(self, base_url: str) -> None:
        self.base_url = base_url.rstrip("/")

    def game_url(self, game_id: UUID) -> str:
        return f"{self.base_url}/games/{game_id}"

    def games_url(self) -> str:
        return f"{self.base_url}/games"

    def root_url(self) -> str:
        return f"{self.base_url}/"

    def self_link(self, game_id: UUID) -> Link:
        return Link(
            href=self.game_url(game_id), method=LinkMethod.GET, type=MediaType.JSON
        )

    def submit_guess_link(self, game_id: UUID) -> Link:
        return Link(
            href=self.game_url(game_id),
            method=LinkMethod.POST,
            type=MediaType.FORM,
            title="Submit a guess",
        )

    def delete_link(self, game_id: UUID) -> Link:
        return Link(
            href=self.game_url(game_id),
            method=LinkMethod.DELETE,
            title="Delete this game",
        )

    def new_game_link(self) -> Link:
        return Link(
            href=self.games_url(),
            method=LinkMethod.POST,
            type=MediaType.JSON,
            title="Create a new game",
        )

    def games_link(self) -> Link:
        return Link(
            href=self.games_url(),
            method=LinkMethod.GET,
            type=MediaType.JSON,
            title="Games collection",
        )

    def root_link(self) -> Link:
        return Link(
            href=self.root_url(),
            method=LinkMethod.GET,
            type=MediaType.JSON,
            title="API root",
        )


def assemble_game_links(game: GameModel, builder: LinkBuilder) -> GameLinks:
    """Links legal for a single game in its current state."""
    return GameLinks(
        self_link=builder.self_link(game.game_id),
        submit_guess=builder.submit_guess_link(game.game_id) if game.active else None,
        delete=builder.delete_link(game.game_id),
        new_game=builder.new_game_link(),
        games=builder.games_link(),
    )


def assemble_collection_links(builder: LinkBuilder) -> CollectionLinks:
    return CollectionLinks(
        self_link=builder.games_link(),
        create_game=builder.new_game_link(),
        root=builder.root_link(),
    )


def assemble_root_links(builder: LinkBuilder) -> RootLinks:
    return RootLinks(self_link=builder.root_link(), games=builder.games_link())
