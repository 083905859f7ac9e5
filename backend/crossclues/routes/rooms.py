from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, current_app, jsonify, request

from ..game import errors
from ..game.models import MAX_GRID_SIZE, MIN_GRID_SIZE
from ..game.service import GameService
from ..realtime.handlers import drop_player_sockets

bp = Blueprint("rooms", __name__)

logger = logging.getLogger(__name__)


_STATUS_BY_ERROR: dict[type[errors.GameError], int] = {
    errors.RoomNotFound: 404,
    errors.PlayerNotInRoom: 404,
    errors.RoomAlreadyExists: 409,
    errors.PlayerAlreadyInRoom: 409,
}


def _service() -> GameService:
    return current_app.extensions["crossclues"]


def _notify(room_code: str, reason: str) -> None:
    socketio = current_app.extensions.get("socketio")
    if socketio is not None:
        socketio.emit("room:changed", {"roomCode": room_code, "reason": reason}, to=room_code)


def _drop_subscriber(room_code: str, player: str) -> None:
    socketio = current_app.extensions.get("socketio")
    subscriptions = current_app.extensions.get("crossclues_subscriptions")
    if socketio is not None and subscriptions is not None:
        drop_player_sockets(socketio, subscriptions, room_code, player)


def _bad_request(message: str):
    return jsonify({"error": message, "code": "invalid_request"}), 400


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _payload() -> dict | None:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def _player_name(data: dict) -> str:
    name = data.get("playerName")
    return name.strip() if isinstance(name, str) else ""


@bp.errorhandler(errors.GameError)
def handle_game_error(exc: errors.GameError):
    status = _STATUS_BY_ERROR.get(type(exc), 400)
    logger.warning("%s %s rejected: %s (room=%s)", request.method, request.path, exc.code, exc.room_code)
    return jsonify({"error": str(exc), "code": exc.code}), status


@bp.post("/rooms")
def create_room():
    data = _payload()
    if data is None:
        return _bad_request("Invalid request body")

    room_code = data.get("roomCode")
    room_code = room_code.strip() if isinstance(room_code, str) else ""
    if not room_code:
        return _bad_request("Room code is required")

    player_name = _player_name(data)
    if not player_name:
        return _bad_request("Player name is required")

    grid_size = data.get("gridSize") or current_app.config.get("DEFAULT_GRID_SIZE")
    if not _is_int(grid_size) or not MIN_GRID_SIZE <= grid_size <= MAX_GRID_SIZE:
        return _bad_request(f"Grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}")

    summary = _service().create_room(room_code, player_name, grid_size)
    return (
        jsonify(
            {
                "roomCode": summary.code,
                "playerName": summary.player_name,
                "gridSize": summary.grid_size,
                "cardsDealt": summary.cards_dealt,
                "players": list(summary.players),
                "message": "Room created successfully",
            }
        ),
        201,
    )


@bp.post("/rooms/<code>/join")
def join_room(code: str):
    data = _payload()
    if data is None:
        return _bad_request("Invalid request body")

    player_name = _player_name(data)
    if not player_name:
        return _bad_request("Player name is required")

    cards_dealt = _service().join_room(code, player_name)
    _notify(code, "join")
    return jsonify(
        {
            "roomCode": code,
            "playerName": player_name,
            "cardsDealt": cards_dealt,
            "message": "Joined room successfully",
        }
    )


@bp.post("/rooms/<code>/leave")
def leave_room(code: str):
    data = _payload()
    if data is None:
        return _bad_request("Invalid request body")

    player_name = _player_name(data)
    if not player_name:
        return _bad_request("Player name is required")

    _service().leave_room(code, player_name)
    _drop_subscriber(code, player_name)
    _notify(code, "leave")
    return jsonify({"roomCode": code, "message": "Left room successfully"})


@bp.post("/rooms/<code>/start")
def start_game(code: str):
    _service().start_game(code)
    _notify(code, "start")
    return jsonify({"roomCode": code, "message": "Game started"})


@bp.post("/rooms/<code>/guess")
def submit_guess(code: str):
    data = _payload()
    if data is None:
        return _bad_request("Invalid request body")

    player_name = _player_name(data)
    if not player_name:
        return _bad_request("Player name is required")

    row = data.get("row")
    column = data.get("column")
    if not _is_int(row) or not _is_int(column) or not (0 <= row < MAX_GRID_SIZE and 0 <= column < MAX_GRID_SIZE):
        return _bad_request("Invalid row or column")

    correct = data.get("correct", False)
    if not isinstance(correct, bool):
        return _bad_request("correct must be a boolean")

    game_over = _service().submit_guess(code, player_name, row, column, correct)
    _notify(code, "guess")
    return jsonify({"roomCode": code, "message": "Guess recorded", "gameOver": game_over})


@bp.get("/rooms/<code>/state")
def get_state(code: str):
    player_name = request.args.get("playerName", "").strip()
    if not player_name:
        return _bad_request("playerName query parameter is required")

    state = _service().get_state(code, player_name)
    return jsonify(state.to_dict())
