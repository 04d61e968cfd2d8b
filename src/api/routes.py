"""
HTTP routes. Thin layer: parse the request, identify the player, hand over to the GameService.

The player is identified by the `player` cookie, which is set when joining a game.
Cookie values are latin-1 only, so the name is stored percent-encoded.
"""

from typing import Annotated, Optional
from urllib.parse import quote, unquote

from fastapi import (
    APIRouter,
    Body,
    Cookie,
    Depends,
    HTTPException,
    Query,
    Request,
    Response,
    status,
)

from src.api.models import (
    BoundsResponse,
    ChatLineResponse,
    ChatRequest,
    CreateGameRequest,
    CreateGameResponse,
    GameResponse,
    GetGameRequest,
    HandResponse,
    JoinGameRequest,
    PlacedTileResponse,
    PlaceTileRequest,
    PlacementResponse,
    PlayerRequest,
    PlayerResponse,
    RemainingPieceResponse,
    TurnResponse,
)
from src.services.game_service import GameService

PLAYER_COOKIE = "player"

router = APIRouter()


def get_service(request: Request) -> GameService:
    return request.app.state.service


def current_player(player: Annotated[Optional[str], Cookie()] = None) -> str:
    if not player:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Join the game first (no player cookie).",
        )
    return unquote(player)


Service = Annotated[GameService, Depends(get_service)]
CurrentPlayer = Annotated[str, Depends(current_player)]


# --- GAMES ---
@router.post("/games", response_model=CreateGameResponse)
def create_game(request: CreateGameRequest, service: Service) -> CreateGameResponse:
    return service.create_game(request)


@router.get("/games", response_model=list[GameResponse])
def list_games(service: Service) -> list[GameResponse]:
    return service.list_games()


@router.get("/games/{game_id}", response_model=GameResponse)
def get_game(game_id: str, service: Service) -> GameResponse:
    return service.get_game(GetGameRequest(game_id=game_id))


# --- PLAYERS ---
@router.get("/games/{game_id}/players", response_model=list[PlayerResponse])
def list_players(game_id: str, service: Service) -> list[PlayerResponse]:
    return service.list_players(GetGameRequest(game_id=game_id))


@router.post("/games/{game_id}/players", response_model=HandResponse)
def join_game(
    game_id: str,
    name: Annotated[str, Body(embed=True)],
    response: Response,
    service: Service,
) -> HandResponse:
    hand = service.join_game(JoinGameRequest(game_id=game_id, player_name=name))
    response.set_cookie(PLAYER_COOKIE, quote(hand.player_name), path="/")
    return hand


@router.get(
    "/games/{game_id}/players/{player_name}/pieces", response_model=HandResponse
)
def get_hand(game_id: str, player_name: str, service: Service) -> HandResponse:
    return service.get_hand(PlayerRequest(game_id=game_id, player_name=player_name))


@router.post("/games/{game_id}/turn", response_model=TurnResponse)
def end_turn(game_id: str, player: CurrentPlayer, service: Service) -> TurnResponse:
    return service.end_turn(PlayerRequest(game_id=game_id, player_name=player))


# --- BOARD / BAG ---
@router.get("/games/{game_id}/board", response_model=list[PlacedTileResponse])
def get_board(game_id: str, service: Service) -> list[PlacedTileResponse]:
    return service.get_board(GetGameRequest(game_id=game_id))


@router.post("/games/{game_id}/board", response_model=PlacementResponse)
def place_tile(
    game_id: str,
    shape: Annotated[str, Body()],
    color: Annotated[str, Body()],
    row: Annotated[int, Body()],
    column: Annotated[int, Body()],
    player: CurrentPlayer,
    service: Service,
) -> PlacementResponse:
    request = PlaceTileRequest(
        game_id=game_id,
        player_name=player,
        shape=shape,
        color=color,
        row=row,
        column=column,
    )
    return service.place_tile(request)


@router.get("/games/{game_id}/pieces", response_model=list[RemainingPieceResponse])
def get_remaining_pieces(
    game_id: str, service: Service
) -> list[RemainingPieceResponse]:
    return service.get_remaining_pieces(GetGameRequest(game_id=game_id))


@router.get("/games/{game_id}/dimensions", response_model=BoundsResponse)
def get_bounds(game_id: str, service: Service) -> BoundsResponse:
    return service.get_bounds(GetGameRequest(game_id=game_id))


# --- CHAT ---
@router.get("/games/{game_id}/chat", response_model=list[ChatLineResponse])
def get_game_chat(
    game_id: str,
    service: Service,
    last_id: Annotated[Optional[int], Query(alias="lastid")] = None,
) -> list[ChatLineResponse]:
    return service.get_chat(game_id, last_id)


@router.post("/games/{game_id}/chat", response_model=ChatLineResponse)
def post_game_chat(
    game_id: str, request: ChatRequest, service: Service
) -> ChatLineResponse:
    return service.post_chat(request, game_id)


@router.get("/chat", response_model=list[ChatLineResponse])
def get_chat(
    service: Service,
    last_id: Annotated[Optional[int], Query(alias="lastid")] = None,
) -> list[ChatLineResponse]:
    return service.get_chat(last_id=last_id)


@router.post("/chat", response_model=ChatLineResponse)
def post_chat(request: ChatRequest, service: Service) -> ChatLineResponse:
    return service.post_chat(request)
