"""Colour-group properties that can be bought, built on and mortgaged."""

from __future__ import annotations

from monopolis.player import Player
from monopolis.tiles import UNMORTGAGE_RATE, Ask, Tile

MAX_HOUSES = 4
MAX_UPGRADES = 5


class Property(Tile):
    """A street in a colour set of ``set_size`` streets."""

    def __init__(
        self,
        name: str,
        position: int,
        price: int,
        base_rent: int,
        colour: str,
        set_size: int,
    ) -> None:
        super().__init__(name, position)
        self.price = price
        self.base_rent = base_rent
        self.colour = colour
        self.set_size = set_size
        self.owner: Player | None = None
        self.houses = 0
        self.hotel = False
        self.mortgaged = False

    @property
    def bought(self) -> bool:
        return self.owner is not None

    def rent(self) -> int:
        """Rent owed by a visitor, given the current buildings."""
        buildings = MAX_UPGRADES if self.hotel else self.houses
        return self.base_rent + buildings * (self.base_rent // 2)

    def on_land(self, player: Player, ask: Ask | None = None) -> list[str]:
        if self.owner is None:
            prompt = (
                f"You landed on {self.name}. Would you like to buy it "
                f"for ${self.price}? (y/n): "
            )
            if not self._confirm(ask, prompt):
                return []
            if not player.deduct_money(self.price):
                return ["Not Enough Money.", "Not enough money to buy."]
            self.owner = player
            player.add_property(self)
            return [
                f"{self.name} at Position: {self.position}",
                f"You bought {self.name}!",
            ]

        if self.owner is player or self.mortgaged:
            return []

        rent = self.rent()
        messages = [
            f"You landed on {self.name} owned by {self.owner.name}. "
            f"You owe ${rent} in rent."
        ]
        if not self._transfer(player, self.owner, rent):
            messages.append("Not Enough Money.")
        return messages

    def describe(self) -> str:
        text = (
            f"Property: {self.name} | Position: {self.position} | "
            f"Price: ${self.price} | Base Rent: ${self.base_rent}"
        )
        if self.owner is None:
            return text + " | Available to Buy"
        return text + (
            f" | Owner: {self.owner.name} | Houses: {self.houses}"
            f" | Hotel: {self._yes_no(self.hotel)}"
            f" | Mortgaged: {self._yes_no(self.mortgaged)}"
        )

    def upgrade(self, player: Player, ask: Ask | None = None) -> list[str]:
        """Add several houses at once; five upgrades make a hotel."""
        if self.owner is not player:
            return ["You don't own this property."]
        if player.in_jail:
            return ["You can't upgrade while in jail."]
        if not self._confirm(ask, f"Would you like to upgrade {self.name}? (y/n): "):
            return []
        amount = self._ask_int(
            ask, "How many houses do you want to build (max 4, 5 = hotel)? "
        )
        if amount is None or amount <= 0 or self.houses + amount > MAX_UPGRADES:
            return ["Invalid number of upgrades."]
        if not player.deduct_money(amount * (self.price // 2)):
            return ["Not enough money to upgrade."]
        self.houses += amount
        self.hotel = self.houses == MAX_UPGRADES
        return [f"Upgraded successfully. Current houses: {self.houses}"]

    def build_house(
        self, player: Player, player_props: list[Property], ask: Ask | None = None
    ) -> list[str]:
        """Build houses, or a hotel on four houses, when the full set is owned."""
        owned_same_colour = sum(
            1 for p in player_props if p.colour == self.colour and p.owner is player
        )
        if owned_same_colour < self.set_size:
            return ["You do not own the full color set."]
        if self.hotel:
            return ["Cannot build. Already a hotel on this property."]

        if self.houses == MAX_HOUSES:
            if self._confirm(
                ask, "This property has 4 houses. Upgrade to hotel? (y/n): "
            ) and player.deduct_money(self.price // 2):
                self.hotel = True
                return ["Hotel built!"]
            return ["Hotel upgrade cancelled or not enough money."]

        room = MAX_HOUSES - self.houses
        choice = self._ask_int(
            ask, f"How many houses do you want to build (1-{room}): "
        )
        if choice is None or not 1 <= choice <= room:
            return ["Invalid number of houses."]
        if not player.deduct_money((self.price // 2) * choice):
            return ["Not enough money."]
        self.houses += choice
        return [f"Built {choice} house(s). Total: {self.houses}"]

    def sell_house(self, player: Player, ask: Ask | None = None) -> list[str]:
        """Sell a hotel back down to four houses, or sell some houses."""
        quarter = self.price // 4
        if self.hotel:
            prompt = (
                f"This property has a hotel. Do you want to sell it for "
                f"${quarter}? (y/n): "
            )
            if not self._confirm(ask, prompt):
                return ["Hotel sale cancelled."]
            self.hotel = False
            self.houses = MAX_HOUSES
            player.add_money(quarter)
            return [f"Hotel sold. Downgraded to 4 houses. You received ${quarter}"]

        if self.houses == 0:
            return ["No houses to sell on this property."]

        choice = self._ask_int(
            ask,
            f"This property has {self.houses} house(s). "
            "How many do you want to sell? ",
        )
        if choice is None or not 1 <= choice <= self.houses:
            return ["Invalid number of houses."]
        self.houses -= choice
        earned = quarter * choice
        player.add_money(earned)
        return [
            f"Sold {choice} house(s). You received ${earned}. "
            f"Remaining houses: {self.houses}"
        ]

    def mortgage(self, player: Player) -> list[str]:
        if self.owner is not player:
            return ["You don't own this property."]
        messages = []
        if self.houses > 0:
            # Only a warning: the mortgage still goes ahead.
            messages += [
                "Cannot Mortgage.Sell the houses first.",
                f"You have {self.houses} Houses.",
            ]
        if self.mortgaged:
            return messages + ["Already mortgaged."]
        if player.in_jail:
            return messages + ["You can't mortgage from jail."]
        self.mortgaged = True
        value = self.price // 2
        player.add_money(value)
        return messages + [f"Property mortgaged for ${value}."]

    def unmortgage(self, player: Player) -> list[str]:
        if self.owner is not player or not self.mortgaged:
            return ["Unmortgage not allowed."]
        if not player.deduct_money(int(self.price * UNMORTGAGE_RATE)):
            return ["Not enough money to unmortgage."]
        self.mortgaged = False
        return ["Unmortgaged successfully."]