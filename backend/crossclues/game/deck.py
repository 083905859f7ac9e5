from __future__ import annotations

import random

from .models import Card, Room


def build_deck(grid_size: int, rng: random.Random | None = None) -> list[Card]:
    cards = [Card(row, column) for row in range(grid_size) for column in range(grid_size)]
    (rng or random).shuffle(cards)
    return cards


def cards_per_player(player_count: int) -> int:
    """Hand cap for a room of ``player_count`` players.

    Evaluated at every draw, so a hand dealt under the larger cap is kept
    when more players join; only later draws see the smaller cap.
    """
    return 2 if player_count <= 3 else 1


def draw_card(room: Room, player: str) -> bool:
    hand = room.hands.setdefault(player, [])
    if room.deck and len(hand) < cards_per_player(len(room.players)):
        hand.append(room.deck.pop(0))
        return True
    return False


def deal_hand(room: Room, player: str) -> int:
    dealt = 0
    for _ in range(cards_per_player(len(room.players))):
        if draw_card(room, player):
            dealt += 1
    return dealt


def discard_card(room: Room, player: str, row: int, column: int) -> bool:
    hand = room.hands.get(player, [])
    try:
        hand.remove(Card(row, column))
    except ValueError:
        return False
    return True


def return_hand(room: Room, player: str) -> None:
    # Back to the bottom of the deck, unshuffled.
    room.deck.extend(room.hands.pop(player, []))
