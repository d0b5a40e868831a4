"""Utility squares whose rent depends on the visitor's last dice roll."""

from __future__ import annotations

from monopolis.player import Player
from monopolis.tiles import Ask, Tile

SINGLE_MULTIPLIER = 4
PAIR_MULTIPLIER = 10
UNMORTGAGE_RATE = 0.6


def _confirm(ask: Ask | None, prompt: str) -> bool:
    if ask is None:
        return False
    return ask(prompt).strip()[:1] in ("y", "Y")


class Utility(Tile):
    """A utility company."""

    def __init__(self, name: str, position: int, price: int) -> None:
        super().__init__(name, position)
        self.price = price
        self.owner: Player | None = None
        self.mortgaged = False

    @property
    def bought(self) -> bool:
        return self.owner is not None

    def on_land(self, player: Player, ask: Ask | None = None) -> list[str]:
        if self.owner is None:
            prompt = (
                f"You landed on utility: {self.name}. Buy for ${self.price}? (y/n): "
            )
            if not _confirm(ask, prompt):
                return []
            if not player.deduct_money(self.price):
                return ["Not Enough Money.", "Not enough money to buy utility."]
            self.owner = player
            player.add_utility(self)
            player.utility_count += 1
            return [
                f"Utility added: {self.name} at Position: {self.position}",
                "Utility bought!",
            ]

        if self.owner is player or self.mortgaged or player.last_roll is None:
            return []

        roll = sum(player.last_roll)
        multiplier = (
            SINGLE_MULTIPLIER if self.owner.utility_count == 1 else PAIR_MULTIPLIER
        )
        rent = roll * multiplier
        messages = [f"You rolled {roll}. Pay rent ${rent} to {self.owner.name}."]
        if player.deduct_money(rent):
            self.owner.add_money(rent)
        else:
            messages.append("Not Enough Money.")
        return messages

    def mortgage(self, player: Player) -> list[str]:
        if self.owner is not player:
            return ["You Do not own it."]
        if self.mortgaged:
            return ["Already mortgaged."]
        if player.in_jail:
            return ["You can't mortgage from jail."]
        player.utility_count -= 1
        self.mortgaged = True
        value = self.price // 2
        player.add_money(value)
        return [f"{self.name}Property mortgaged for ${value}."]

    def unmortgage(self, player: Player) -> list[str]:
        if self.owner is not player or not self.mortgaged:
            return ["Unmortgage not allowed."]
        cost = int(self.price * UNMORTGAGE_RATE)
        if not player.deduct_money(cost):
            return ["Not enough money to unmortgage."]
        self.mortgaged = False
        player.utility_count += 1
        return ["Unmortgaged successfully."]

    def describe(self) -> str:
        return (
            f"[UTILITY] Name: {self.name}, Position: {self.position}, "
            f"Price: ${self.price}, "
            f"Owned: {'Yes' if self.bought else 'No'}, "
            f"Mortgaged: {'Yes' if self.mortgaged else 'No'}, "
            f"Owner: {self.owner.name if self.owner else 'None'}"
        )