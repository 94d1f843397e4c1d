"""HTTP routes. Each route resolves the game, hands over to the GameService and picks a JSON or HTML representation."""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Form, Header, Request, Response, status
from fastapi.responses import RedirectResponse

from numguess.api.links import LinkBuilder, assemble_game_links
from numguess.api.models import (
    ApiRootResponse,
    DeleteGameRequest,
    ErrorResponse,
    GameCreationResponse,
    GamesCollectionResponse,
    GameStateResponse,
    GetGameRequest,
    GuessRequest,
    GuessResultResponse,
)
from numguess.api.negotiation import wants_html
from numguess.services.game_service import GameService
from numguess.web.views import render_game_page, render_games_page


def get_service(request: Request) -> GameService:
    return request.app.state.service


def get_link_builder(request: Request) -> LinkBuilder:
    """Links are absolute and follow whatever host / prefix the client used to reach us."""
    return LinkBuilder(str(request.base_url))


Service = Annotated[GameService, Depends(get_service)]
Links = Annotated[LinkBuilder, Depends(get_link_builder)]
Accept = Annotated[Optional[str], Header()]

NOT_FOUND = {404: {"model": ErrorResponse}}

router = APIRouter()


@router.get("/", response_model=ApiRootResponse)
def api_root(service: Service, links: Links) -> ApiRootResponse:
    return service.api_root(links)


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/games", response_model=GamesCollectionResponse)
def list_games(
    request: Request, service: Service, links: Links, accept: Accept = None
) -> GamesCollectionResponse | Response:
    collection = service.list_games(links)
    if wants_html(accept):
        return render_games_page(request, collection)
    return collection


@router.post(
    "/games",
    response_model=GameCreationResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_game(
    response: Response, service: Service, links: Links, accept: Accept = None
) -> GameCreationResponse | Response:
    created = service.create_new_game(links)
    if wants_html(accept):
        return RedirectResponse(created.href, status_code=status.HTTP_303_SEE_OTHER)
    response.headers["Location"] = created.href
    return created


@router.get("/games/{game_id}", response_model=GameStateResponse, responses=NOT_FOUND)
def get_game(
    game_id: UUID,
    request: Request,
    service: Service,
    links: Links,
    accept: Accept = None,
) -> GameStateResponse | Response:
    if wants_html(accept):
        game = service.get_game_view(GetGameRequest(game_id=game_id))
        return render_game_page(request, game, assemble_game_links(game, links))
    return service.get_game_state(GetGameRequest(game_id=game_id), links)


@router.post(
    "/games/{game_id}",
    response_model=GuessResultResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        **NOT_FOUND,
    },
)
def submit_guess(
    game_id: UUID,
    service: Service,
    links: Links,
    guess: Annotated[Optional[str], Form()] = None,
    accept: Accept = None,
) -> GuessResultResponse | Response:
    result = service.submit_guess(GuessRequest(game_id=game_id, guess=guess), links)
    if wants_html(accept):
        # Post/Redirect/Get: the game page shows the outcome of the last guess.
        return RedirectResponse(
            links.game_url(game_id), status_code=status.HTTP_303_SEE_OTHER
        )
    return result


@router.delete(
    "/games/{game_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
def delete_game(game_id: UUID, service: Service) -> Response:
    service.delete_game(DeleteGameRequest(game_id=game_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
