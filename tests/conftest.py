"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import random
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from src.core.shared_types import Color, Shape
from src.db.memory_repository import InMemorySessionRepository
from src.main import create_app
from src.quirky.board import Board
from src.quirky.game import GameSession
from src.quirky.pieces import Piece, PlacedTile
from src.services.game_service import GameService

CENTER = 90


@pytest.fixture
def rng() -> random.Random:
    """Seeded, so draws are reproducible"""
    return random.Random(1234)


@pytest.fixture
def board() -> Board:
    return Board()


@pytest.fixture
def board_with_tiles() -> Callable[..., Board]:
    """Call the inner function with (shape, color, row, column) tuples to get a board with those tiles on it"""

    def _create_board(*tiles: tuple[Shape, Color, int, int]) -> Board:
        new_board = Board()
        for shape, color, row, column in tiles:
            new_board.place(PlacedTile(Piece(shape, color), row, column))
        return new_board

    return _create_board


@pytest.fixture
def session(rng: random.Random) -> GameSession:
    return GameSession("test game", rng=rng)


@pytest.fixture
def repository() -> InMemorySessionRepository:
    """A fresh repository per test"""
    return InMemorySessionRepository()


@pytest.fixture
def service(
    repository: InMemorySessionRepository, rng: random.Random
) -> GameService:
    return GameService(repository, rng=rng)


@pytest.fixture
def client(service: GameService) -> Generator[TestClient, None, None]:
    with TestClient(create_app(service)) as test_client:
        yield test_client
