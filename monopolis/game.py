"""Turn handling, asset management menus and the text board."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from typing import Any

from monopolis.board import Board
from monopolis.player import Player
from monopolis.tiles import Ask

CELL_WIDTH = 16
NUM_CELLS = 11
MIN_PLAYERS = 2
MAX_PLAYERS = 8
JAIL_TURN_LIMIT = 2
GO_REWARD = 200

TOP_ROW = (
    "GO", "Mediterranean", "Community", "Baltic", "Income Tax",
    "Reading RR", "Oriental", "Chance", "Vermont", "Connecticut", "Jail",
)
LEFT_COLUMN = (
    "Go To Jail", "Pacific", "Community", "N. Carolina", "Pennsylvania",
    "Short Line", "Chance", "Park Place", "Luxury Tax",
)
RIGHT_COLUMN = (
    "New York", "Free Parking", "Kentucky", "Chance", "Indiana",
    "Illinois", "B&O RR", "Atlantic", "Water Works",
)
BOTTOM_ROW = (
    "Boardwalk", "Luxury Tax", "Park Place", "Chance", "Short Line",
    "Pennsylvania", "N. Carolina", "Community", "Pacific", "Go To Jail", "Start",
)


def _confirm(ask: Ask, prompt: str) -> bool:
    return ask(prompt).strip()[:1] in ("y", "Y")


def _ask_int(ask: Ask, prompt: str) -> int | None:
    try:
        return int(ask(prompt).strip())
    except ValueError:
        return None


class Game:
    """A game on one board; ``ask`` puts questions to the players."""

    def __init__(self, ask: Ask | None = None, rng: random.Random | None = None) -> None:
        self.ask = ask
        self.rng = rng if rng is not None else random.Random()
        self.board = Board(self.rng)
        self.players: list[Player] = []

    def draw_cell(self, text: str) -> str:
        return "|" + text.ljust(CELL_WIDTH) + " " * max(0, CELL_WIDTH - len(text))

    def render_board(self) -> str:
        border = "-" * ((CELL_WIDTH + 1) * NUM_CELLS + 1)
        gap = " " * ((CELL_WIDTH + 1) * (NUM_CELLS - 2))
        lines = [border, "".join(self.draw_cell(t) for t in TOP_ROW) + "|"]
        lines += [
            self.draw_cell(left) + gap + self.draw_cell(right) + "|"
            for left, right in zip(LEFT_COLUMN, RIGHT_COLUMN)
        ]
        lines.append("".join(self.draw_cell(t) for t in reversed(BOTTOM_ROW)) + "|")
        lines.append(border)
        return "\n".join(lines)

    def add_players(self, names: Iterable[str]) -> list[Player]:
        """Seat the named players; there must be between two and eight."""
        names = list(names)
        if not MIN_PLAYERS <= len(names) <= MAX_PLAYERS:
            raise ValueError(
                f"a game needs {MIN_PLAYERS} to {MAX_PLAYERS} players, got {len(names)}"
            )
        new = [Player(name) for name in names]
        self.players.extend(new)
        return new

    def _manage_mortgages(
        self, player: Player, assets: Sequence[Any], label: str
    ) -> list[str]:
        if not assets or self.ask is None:
            return []
        assets = list(assets)
        menu = (
            f"{label} Management for {player.name}:\n"
            f"1. Mortgage {label}s\n2. Unmortgage {label}s\n3. Done\n"
            "Enter your choice: "
        )
        messages: list[str] = []
        while True:
            choice = _ask_int(self.ask, menu)
            if choice == 1:
                for asset in assets:
                    if not asset.mortgaged and _confirm(
                        self.ask, f"Do you want to mortgage {asset.name}? (y/n): "
                    ):
                        messages += asset.mortgage(player)
            elif choice == 2:
                for asset in assets:
                    if asset.mortgaged and _confirm(
                        self.ask, f"Do you want to unmortgage {asset.name}? (y/n): "
                    ):
                        messages += asset.unmortgage(player)
            elif choice == 3:
                return messages

    def manage_utilities(self, player: Player) -> list[str]:
        return self._manage_mortgages(player, player.utilities, "Utility")

    def manage_railways(self, player: Player) -> list[str]:
        return self._manage_mortgages(player, player.railways, "Railway")

    def manage_buildings(self, player: Player) -> list[str]:
        """Let the player build, sell, mortgage and unmortgage properties."""
        props = list(player.properties)
        if not props or self.ask is None:
            return []
        ask = self.ask
        menu = (
            f"Player {player.name}, do you want to:\n"
            "1. Build Houses\n2. Sell Houses\n3. Mortgage Property\n"
            "4. Unmortgage Property\n5. Done\nEnter your choice: "
        )
        messages: list[str] = []
        while True:
            choice = _ask_int(ask, menu)
            if choice == 1:
                for p in props:
                    if _confirm(ask, f"Do you want to build on {p.name}? (y/n): "):
                        messages += p.build_house(player, props, ask)
            elif choice == 2:
                for p in props:
                    if _confirm(ask, f"Do you want to sell houses on {p.name}? (y/n): "):
                        messages += p.sell_house(player, ask)
            elif choice == 3:
                for p in props:
                    if not p.mortgaged and _confirm(
                        ask, f"Do you want to mortgage {p.name}? (y/n): "
                    ):
                        messages += p.mortgage(player)
            elif choice == 4:
                for p in props:
                    if p.mortgaged and _confirm(
                        ask, f"Do you want to unmortgage {p.name}? (y/n): "
                    ):
                        messages += p.unmortgage(player)
            elif choice == 5:
                return messages

    def take_turn(
        self, player: Player, die1: int | None = None, die2: int | None = None
    ) -> list[str]:
        """Play one turn; dice not given are rolled. Returns the messages."""
        if player.is_bankrupt():
            return []
        messages = [
            f"It's {player.name}'s turn:",
            self.board.tile(player.position).describe(),
            f"Your credit: {player.money}",
            f"Current Position: {player.position}",
        ]
        if not player.in_jail:
            messages += self.manage_buildings(player)
            messages += self.manage_railways(player)
            messages += self.manage_utilities(player)

        if die1 is None:
            die1 = self.rng.randint(1, 6)
        if die2 is None:
            die2 = self.rng.randint(1, 6)
        total = die1 + die2
        player.last_roll = (die1, die2)
        messages.append(f"Rolled {die1} and {die2} (total {total})")

        previous = player.position
        if player.in_jail:
            if die1 == die2:
                messages.append("You rolled a double and are released from jail!")
                player.release_from_jail()
                player.move(total)
            elif player.jail_turns >= JAIL_TURN_LIMIT:
                messages.append(
                    "You have served 3 turns in jail. You're now released."
                )
                player.release_from_jail()
                player.move(total)
            else:
                messages.append(
                    "You're in jail and didn't roll a double. Stay in jail."
                )
                player.increment_jail_turns()
        else:
            player.move(total)

        new_position = player.position
        if new_position < previous:
            messages += self.board.tile(0).on_land(player, self.ask)
            messages.append("You Have passed GO. 200 Added.")
            player.add_money(GO_REWARD)

        tile = self.board.tile(new_position)
        messages.append(tile.describe())
        messages += tile.on_land(player, self.ask)
        messages.append(f"Updated credit: {player.money}")
        if player.is_bankrupt():
            messages.append(f"{player.name} has gone bankrupt!")
        winner = self.winner()
        if winner is not None:
            messages.append(f"{winner.name} wins the game!")
        return messages

    def winner(self) -> Player | None:
        """The last player not bankrupt, if only one is left."""
        alive = [p for p in self.players if not p.is_bankrupt()]
        return alive[0] if len(alive) == 1 else None