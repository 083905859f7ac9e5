from __future__ import annotations


class GameError(Exception):
    """Base for every rejected game operation.

    Rejections are deterministic: retrying the same call against the same
    room state fails the same way. The room is never modified by a call
    that raises.
    """

    code = "game_error"
    message = "game error"

    def __init__(self, room_code: str | None = None, player: str | None = None, detail: str | None = None):
        self.room_code = room_code
        self.player = player
        self.detail = detail
        super().__init__(detail or self.message)

    def __str__(self) -> str:
        return self.detail or self.message


class RoomNotFound(GameError):
    code = "room_not_found"
    message = "room not found"


class RoomAlreadyExists(GameError):
    code = "room_exists"
    message = "room already exists"


class PlayerAlreadyInRoom(GameError):
    code = "player_exists"
    message = "player name already taken in this room"


class PlayerNotInRoom(GameError):
    code = "player_not_found"
    message = "player not found in this room"


class NotEnoughPlayers(GameError):
    code = "not_enough_players"
    message = "need at least 2 players to start"


class GameNotStarted(GameError):
    code = "game_not_started"
    message = "game has not started"


class GameAlreadyOver(GameError):
    code = "game_over"
    message = "game is already over"


class NoCardForCell(GameError):
    code = "no_card"
    message = "player does not have a card for this cell"


class InvalidGridSize(GameError):
    code = "invalid_grid_size"
    message = "grid size must be between 3 and 7"


class WordCatalogTooSmall(GameError):
    code = "word_catalog_too_small"
    message = "not enough words in the catalog for this grid"
