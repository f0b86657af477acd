"""
This module provides the Table class which manages the seats of a hold'em game.

The Table class handles:
- Player seating order and unique names
- The dealer flag and its rotation
- Small and big blind positions
- Player state queries (active, all-in, folded)
- Removal of players who ran out of chips
"""

from typing import Dict, List

from data.states.player_state import PlayerState
from exceptions import InvalidGameStateError
from loggers.table_logger import TableLogger

from .player import Player


class Table:
    """The seats of a game in clockwise order.

    Exactly one seat carries the dealer flag. A new table flags the last seat so
    that the first call to ``rotate_dealer`` hands the button to seat 0.

    Attributes:
        players (List[Player]): Ordered list of players, representing seating order
        dealer_index (int): Seat holding the dealer flag
    """

    def __init__(self, players: List[Player]):
        """
        Args:
            players (List[Player]): Ordered list of players. The order determines
                the seating arrangement and turn order.

        Raises:
            InvalidGameStateError: If the table is empty or names repeat
        """
        if not players:
            TableLogger.log_seating_error("no players")
            raise InvalidGameStateError("A table needs at least one player")

        names = [p.name for p in players]
        if len(set(names)) != len(names):
            TableLogger.log_seating_error(f"duplicate names in {names}")
            raise InvalidGameStateError("Player names must be unique")

        self.players = list(players)
        for player in self.players:
            player.is_dealer = False
        self.dealer_index = len(self.players) - 1
        self.players[self.dealer_index].is_dealer = True

        TableLogger.log_table_creation(len(self.players))

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self):
        return iter(self.players)

    @property
    def dealer(self) -> Player:
        return self.players[self.dealer_index]

    def seat_after(self, index: int, offset: int = 1) -> int:
        """Seat index ``offset`` places clockwise from ``index``, wrapping."""
        return (index + offset) % len(self.players)

    def rotate_dealer(self) -> Player:
        """Move the dealer flag to the next seat and return the new dealer."""
        self.players[self.dealer_index].is_dealer = False
        self.dealer_index = self.seat_after(self.dealer_index)
        self.players[self.dealer_index].is_dealer = True

        TableLogger.log_dealer_position(self.dealer_index, self.dealer.name)
        return self.dealer

    @property
    def small_blind_index(self) -> int:
        return self.seat_after(self.dealer_index, 1)

    @property
    def big_blind_index(self) -> int:
        """Two seats after the dealer; heads-up this wraps back onto the dealer."""
        return self.seat_after(self.dealer_index, 2)

    def seats_from(self, start: int) -> List[Player]:
        """All players in clockwise order beginning at seat ``start``."""
        count = len(self.players)
        return [self.players[(start + i) % count] for i in range(count)]

    def showdown_order(self) -> List[Player]:
        """Seat order starting left of the dealer, the order ties are broken in."""
        return self.seats_from(self.seat_after(self.dealer_index))

    def active_players(self) -> List[Player]:
        """Players who can still act: not folded and with chips behind."""
        return [p for p in self.players if p.can_act]

    def in_hand_players(self) -> List[Player]:
        """Players who have not folded, all-in or not."""
        return [p for p in self.players if not p.folded]

    def all_in_players(self) -> List[Player]:
        return [p for p in self.players if p.is_all_in]

    def folded_players(self) -> List[Player]:
        return [p for p in self.players if p.folded]

    def opponent_states(self, viewer: Player) -> List[PlayerState]:
        """Snapshots of every other seat, hole cards hidden, in seat order."""
        return [p.get_state() for p in self.players if p is not viewer]

    def log_state(self) -> None:
        TableLogger.log_player_states(
            [p.name for p in self.active_players()],
            [p.name for p in self.all_in_players()],
            [p.name for p in self.folded_players()],
        )

    def contributions(self) -> Dict[str, int]:
        """Chips each seat has put in this round, keyed by name."""
        return {p.name: p.total_bet for p in self.players}

    def total_chips(self) -> int:
        """Chips on the table: stacks plus current contributions."""
        return sum(p.chips + p.total_bet for p in self.players)

    def remove_broke_players(self) -> List[Player]:
        """Remove players with an empty stack, keeping the dealer flag on a live seat.

        Returns:
            List[Player]: The players that were removed
        """
        broke = [p for p in self.players if p.chips == 0]
        if not broke:
            return []

        # Hand the flag back to the nearest surviving seat before the dealer
        # so the next rotation lands on the seat that would have been next.
        count = len(self.players)
        anchor = None
        for step in range(count):
            candidate = self.players[(self.dealer_index - step) % count]
            if candidate.chips > 0:
                anchor = candidate
                break

        for player in broke:
            player.is_dealer = False
            self.players.remove(player)
            TableLogger.log_player_removed(player.name)

        if anchor is not None:
            self.dealer_index = self.players.index(anchor)
            anchor.is_dealer = True
        elif self.players:
            self.dealer_index = 0
            self.players[0].is_dealer = True
        return broke
