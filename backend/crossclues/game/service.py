from __future__ import annotations

import logging
import random

from .deck import deal_hand, discard_card, draw_card, return_hand
from .errors import (
    GameAlreadyOver,
    GameNotStarted,
    NoCardForCell,
    NotEnoughPlayers,
    PlayerAlreadyInRoom,
    PlayerNotInRoom,
)
from .grid import count_correct, is_complete, project_grid, resolve_cell
from .models import DEFAULT_GRID_SIZE, MIN_PLAYERS, GameState, RoomSummary
from .registry import RoomRegistry, setup_board


logger = logging.getLogger(__name__)


class GameService:
    """Room operations on top of a :class:`RoomRegistry`.

    Mutations hold the room's write lock for their whole duration and check
    everything before changing anything, so a call either applies fully or
    raises a :class:`~crossclues.game.errors.GameError` with the room
    untouched. ``get_state`` holds the read lock.
    """

    def __init__(
        self,
        registry: RoomRegistry | None = None,
        rng: random.Random | None = None,
        default_grid_size: int = DEFAULT_GRID_SIZE,
    ) -> None:
        self.rng = rng
        self.registry = registry if registry is not None else RoomRegistry(rng=rng)
        self.default_grid_size = default_grid_size

    def create_room(self, code: str, player: str, grid_size: int | None = None) -> RoomSummary:
        size = grid_size or self.default_grid_size
        room, dealt = self.registry.create(code, size, player)
        logger.info("room %s created (grid %dx%d) by %s", code, size, size, player)
        return RoomSummary(
            code=room.code,
            grid_size=room.grid_size,
            player_name=player,
            cards_dealt=dealt,
            players=(player,),
        )

    def join_room(self, code: str, player: str) -> int:
        room = self.registry.find(code)
        with room.lock.write_locked():
            if room.has_player(player):
                raise PlayerAlreadyInRoom(room_code=code, player=player)

            room.players.append(player)
            room.hands[player] = []
            dealt = deal_hand(room, player)

        logger.info("%s joined room %s (%d cards dealt)", player, code, dealt)
        return dealt

    def leave_room(self, code: str, player: str) -> None:
        room = self.registry.find(code)
        with room.lock.write_locked():
            if not room.has_player(player):
                raise PlayerNotInRoom(room_code=code, player=player)

            room.players.remove(player)
            return_hand(room, player)

        logger.info("%s left room %s", player, code)

    def start_game(self, code: str) -> None:
        room = self.registry.find(code)
        with room.lock.write_locked():
            if len(room.players) < MIN_PLAYERS:
                raise NotEnoughPlayers(room_code=code)

            setup_board(room, self.rng)
            for player in room.players:
                room.hands[player] = []
                deal_hand(room, player)

            room.started = True
            room.over = False
            player_count = len(room.players)

        logger.info("game started in room %s with %d players", code, player_count)

    def submit_guess(self, code: str, player: str, row: int, column: int, correct: bool) -> bool:
        room = self.registry.find(code)
        with room.lock.write_locked():
            if not room.started:
                raise GameNotStarted(room_code=code, player=player)
            if room.over:
                raise GameAlreadyOver(room_code=code, player=player)
            if not room.has_player(player):
                raise PlayerNotInRoom(room_code=code, player=player)
            in_grid = 0 <= row < room.grid_size and 0 <= column < room.grid_size
            if not in_grid or not room.has_card(player, row, column):
                raise NoCardForCell(room_code=code, player=player)

            # The played card is gone before the redraw, so it cannot come back.
            discard_card(room, player, row, column)
            resolve_cell(room.grid, row, column, player, correct)
            draw_card(room, player)
            room.over = is_complete(room.grid)
            over = room.over

        logger.debug("%s guessed (%d, %d) in room %s: correct=%s", player, row, column, code, correct)
        if over:
            logger.info("game over in room %s", code)
        return over

    def get_state(self, code: str, player: str) -> GameState:
        room = self.registry.find(code)
        with room.lock.read_locked():
            if not room.has_player(player):
                raise PlayerNotInRoom(room_code=code, player=player)

            return GameState(
                room_code=room.code,
                grid_size=room.grid_size,
                game_started=room.started,
                game_over=room.over,
                correct_guesses=count_correct(room.grid),
                total_cells=room.grid_size * room.grid_size,
                row_words=tuple(room.row_words),
                column_words=tuple(room.column_words),
                player_cards=tuple(room.hands.get(player, [])),
                grid=project_grid(room.grid, player),
                players=tuple(room.players),
            )

    def clear_rooms(self) -> None:
        self.registry.clear_all()
