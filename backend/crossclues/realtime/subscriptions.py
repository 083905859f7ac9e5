from __future__ import annotations

from threading import Lock


class RoomSubscriptions:
    """Socket id -> (room code, player name) for sockets receiving room notices.

    A socket follows one room at a time; subscribing again replaces the
    previous entry.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._by_sid: dict[str, tuple[str, str]] = {}

    def add(self, sid: str, room_code: str, player: str) -> tuple[str, str] | None:
        with self._lock:
            previous = self._by_sid.get(sid)
            self._by_sid[sid] = (room_code, player)
            return previous

    def remove(self, sid: str) -> tuple[str, str] | None:
        with self._lock:
            return self._by_sid.pop(sid, None)

    def drop_player(self, room_code: str, player: str) -> list[str]:
        """Forget every socket subscribed as ``player`` in ``room_code``; returns their ids."""
        with self._lock:
            sids = [sid for sid, entry in self._by_sid.items() if entry == (room_code, player)]
            for sid in sids:
                del self._by_sid[sid]
            return sids

    def get(self, sid: str) -> tuple[str, str] | None:
        with self._lock:
            return self._by_sid.get(sid)

    def __len__(self) -> int:
        with self._lock:
            return len(self._by_sid)
