from __future__ import annotations

import random
from threading import Lock

from .deck import build_deck, deal_hand
from .errors import InvalidGridSize, RoomAlreadyExists, RoomNotFound
from .grid import new_grid
from .models import MAX_GRID_SIZE, MIN_GRID_SIZE, Room
from .words import pick_axis_words


def setup_board(room: Room, rng: random.Random | None = None) -> None:
    """Fresh words, grid and deck. Hands are left to the caller."""
    room.row_words, room.column_words = pick_axis_words(room.grid_size, rng)
    room.grid = new_grid(room.grid_size)
    room.deck = build_deck(room.grid_size, rng)


class RoomRegistry:
    """Room code -> Room.

    The registry lock only guards the mapping. Work inside a room happens
    under ``room.lock`` after the registry lock has been released.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._lock = Lock()
        self._rooms: dict[str, Room] = {}
        self._rng = rng

    def create(self, code: str, grid_size: int, first_player: str) -> tuple[Room, int]:
        if not MIN_GRID_SIZE <= grid_size <= MAX_GRID_SIZE:
            raise InvalidGridSize(room_code=code)

        with self._lock:
            if code in self._rooms:
                raise RoomAlreadyExists(room_code=code)

            room = Room(code=code, grid_size=grid_size, players=[first_player])
            setup_board(room, self._rng)
            room.hands[first_player] = []
            dealt = deal_hand(room, first_player)

            self._rooms[code] = room
            return room, dealt

    def find(self, code: str) -> Room:
        with self._lock:
            room = self._rooms.get(code)
        if room is None:
            raise RoomNotFound(room_code=code)
        return room

    def list_codes(self) -> list[str]:
        with self._lock:
            return list(self._rooms)

    def clear_all(self) -> None:
        with self._lock:
            self._rooms = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._rooms)

    def __contains__(self, code: object) -> bool:
        with self._lock:
            return code in self._rooms
