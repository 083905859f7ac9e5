from __future__ import annotations

import logging

from flask import request
from flask_socketio import SocketIO, emit, join_room, leave_room

from ..game.errors import GameError
from ..game.service import GameService
from .subscriptions import RoomSubscriptions


logger = logging.getLogger(__name__)


def _room_and_player(data) -> tuple[str, str]:
    payload = data if isinstance(data, dict) else {}
    room_code = str(payload.get("roomCode") or "").strip()
    player_name = str(payload.get("playerName") or "").strip()
    return room_code, player_name


def drop_player_sockets(socketio: SocketIO, subscriptions: RoomSubscriptions, room_code: str, player: str) -> None:
    """Stop notices to every socket subscribed as ``player`` once they leave the room."""
    for sid in subscriptions.drop_player(room_code, player):
        socketio.server.leave_room(sid, room_code, namespace="/")
        logger.debug("socket %s unsubscribed from room %s: %s left", sid, room_code, player)


def register_socketio_handlers(
    socketio: SocketIO,
    service: GameService,
    subscriptions: RoomSubscriptions | None = None,
) -> RoomSubscriptions:
    """Subscriptions to room change notices.

    Views are per player, so the server only pushes ``room:changed`` to a
    room's subscribers and each client asks for its own state.
    """
    if subscriptions is None:
        subscriptions = RoomSubscriptions()

    @socketio.on("room:subscribe")
    def room_subscribe(data):
        room_code, player_name = _room_and_player(data)
        if not room_code or not player_name:
            emit("room:error", {"error": "invalid_payload", "code": "invalid_payload"})
            return {"ok": False, "error": "invalid_payload"}

        try:
            state = service.get_state(room_code, player_name)
        except GameError as exc:
            emit("room:error", {"error": str(exc), "code": exc.code})
            return {"ok": False, "error": exc.code}

        previous = subscriptions.add(request.sid, room_code, player_name)
        if previous and previous[0] != room_code:
            leave_room(previous[0])
        join_room(room_code)
        logger.debug("socket %s subscribed to room %s as %s", request.sid, room_code, player_name)
        emit("room:state", state.to_dict())
        return {"ok": True}

    @socketio.on("room:unsubscribe")
    def room_unsubscribe(data):
        room_code, _ = _room_and_player(data)
        if not room_code:
            return {"ok": False, "error": "invalid_payload"}

        entry = subscriptions.get(request.sid)
        if entry and entry[0] == room_code:
            subscriptions.remove(request.sid)
        leave_room(room_code)
        return {"ok": True}

    @socketio.on("room:state")
    def room_state(data):
        room_code, player_name = _room_and_player(data)
        if not room_code or not player_name:
            return {"ok": False, "error": "invalid_payload"}

        try:
            state = service.get_state(room_code, player_name)
        except GameError as exc:
            return {"ok": False, "error": exc.code}

        return {"ok": True, "state": state.to_dict()}

    @socketio.on("disconnect")
    def on_disconnect(reason=None):
        # Socket.IO drops the socket from its rooms itself.
        subscriptions.remove(request.sid)

    return subscriptions
