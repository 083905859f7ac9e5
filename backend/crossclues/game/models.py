from __future__ import annotations

from dataclasses import dataclass, field

from .locks import RWLock


MIN_GRID_SIZE = 3
MAX_GRID_SIZE = 7
DEFAULT_GRID_SIZE = 5
MIN_PLAYERS = 2


@dataclass(frozen=True)
class Card:
    row: int
    column: int

    def to_dict(self) -> dict:
        return {"row": self.row, "column": self.column}


@dataclass
class Cell:
    guessed_correctly: bool = False
    # Never sent to clients as-is; see grid.project_grid.
    discarded_by: str | None = None

    @property
    def resolved(self) -> bool:
        return self.guessed_correctly or self.discarded_by is not None


@dataclass
class Room:
    code: str
    grid_size: int
    players: list[str] = field(default_factory=list)
    started: bool = False
    over: bool = False
    row_words: list[str] = field(default_factory=list)
    column_words: list[str] = field(default_factory=list)
    grid: list[list[Cell]] = field(default_factory=list)
    deck: list[Card] = field(default_factory=list)
    hands: dict[str, list[Card]] = field(default_factory=dict)
    lock: RWLock = field(default_factory=RWLock, repr=False, compare=False)

    def has_player(self, name: str) -> bool:
        return name in self.players

    def has_card(self, name: str, row: int, column: int) -> bool:
        return Card(row, column) in self.hands.get(name, [])


@dataclass(frozen=True)
class CellView:
    guessed_correctly: bool
    discarded_by_me: bool

    def to_dict(self) -> dict:
        return {"guessedCorrectly": self.guessed_correctly, "discardedByMe": self.discarded_by_me}


@dataclass(frozen=True)
class RoomSummary:
    code: str
    grid_size: int
    player_name: str
    cards_dealt: int
    players: tuple[str, ...]


@dataclass(frozen=True)
class GameState:
    """One player's view of a room, detached from the live room."""

    room_code: str
    grid_size: int
    game_started: bool
    game_over: bool
    correct_guesses: int
    total_cells: int
    row_words: tuple[str, ...]
    column_words: tuple[str, ...]
    player_cards: tuple[Card, ...]
    grid: tuple[tuple[CellView, ...], ...]
    players: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "roomCode": self.room_code,
            "gridSize": self.grid_size,
            "gameStarted": self.game_started,
            "gameOver": self.game_over,
            "correctGuesses": self.correct_guesses,
            "totalCells": self.total_cells,
            "rowWords": list(self.row_words),
            "columnWords": list(self.column_words),
            "playerCards": [c.to_dict() for c in self.player_cards],
            "grid": [[cell.to_dict() for cell in row] for row in self.grid],
            "players": list(self.players),
        }
