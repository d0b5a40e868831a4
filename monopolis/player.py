"""Player state: money, position, jail status and owned assets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

BOARD_SIZE = 40
JAIL_POSITION = 10
STARTING_MONEY = 5000


@dataclass(eq=False)
class Player:
    """A participant in the game.

    Players compare by identity, so two players with the same name are
    still different owners.
    """

    name: str
    money: int = STARTING_MONEY
    position: int = 0
    in_jail: bool = False
    jail_turns: int = 0
    railway_count: int = 0
    utility_count: int = 0
    last_roll: tuple[int, int] | None = None
    properties: list[Any] = field(default_factory=list)
    utilities: list[Any] = field(default_factory=list)
    railways: list[Any] = field(default_factory=list)

    def move(self, steps: int) -> bool:
        """Advance around the board; return True if the move wrapped past GO."""
        old = self.position
        self.position = (self.position + steps) % BOARD_SIZE
        return self.position < old

    def set_position(self, position: int) -> None:
        self.position = position % BOARD_SIZE

    def add_money(self, amount: int) -> None:
        self.money += amount

    def deduct_money(self, amount: int) -> bool:
        """Pay ``amount`` if the player can afford it; return whether it was paid."""
        if amount > self.money:
            return False
        self.money -= amount
        return True

    def go_to_jail(self) -> None:
        self.in_jail = True
        self.position = JAIL_POSITION
        self.jail_turns = 0

    def release_from_jail(self) -> None:
        self.in_jail = False
        self.jail_turns = 0

    def increment_jail_turns(self) -> None:
        self.jail_turns += 1

    def add_property(self, prop: Any) -> None:
        self.properties.append(prop)

    def add_utility(self, utility: Any) -> None:
        self.utilities.append(utility)

    def add_railway(self, railway: Any) -> None:
        self.railways.append(railway)
        self.railway_count += 1

    def is_bankrupt(self) -> bool:
        """True when in debt and every asset is mortgaged with no houses left."""
        if self.money >= 0:
            return False
        if any(not p.mortgaged or p.houses > 0 for p in self.properties):
            return False
        if any(not u.mortgaged for u in self.utilities):
            return False
        if any(not r.mortgaged for r in self.railways):
            return False
        return True