"""Railway squares: bought, rented by count owned, and mortgaged."""

from __future__ import annotations

from monopolis.player import Player
from monopolis.tiles import UNMORTGAGE_RATE, Ask, Tile

RENT_PER_RAILWAY = 50


class Railway(Tile):
    """A railway; rent depends on how many railways the owner holds."""

    label = "RAILWAY"

    def __init__(self, name: str, position: int, rent: int, price: int) -> None:
        super().__init__(name, position)
        self.rent = rent
        self.price = price
        self.owner: Player | None = None
        self.mortgaged = False
        # When set, landing on one's own railway offers a move to another.
        self.offer_moves = False

    @property
    def bought(self) -> bool:
        return self.owner is not None

    def on_land(self, player: Player, ask: Ask | None = None) -> list[str]:
        if self.owner is None:
            prompt = f"Would You Like to buy {self.name} at {self.position}\n y/n."
            if not self._confirm(ask, prompt):
                return []
            if not player.deduct_money(self.price):
                return ["Not Enough Money.", f"Not enough money to buy {self.name}"]
            self.owner = player
            player.add_railway(self)
            # A purchase counts twice towards the owner's railway total.
            player.railway_count += 1
            return [f"Railway added: {self.name} at Position: {self.position}"]

        if self.owner is not player:
            if self.mortgaged:
                return []
            rent = RENT_PER_RAILWAY * self.owner.railway_count
            messages = [
                f"You landed on {self.owner.name}'s railway. Pay rent : {rent}"
            ]
            if not self._transfer(player, self.owner, rent):
                messages.append("Cannot pay rent. Might go bankrupt!")
            return messages

        messages = [f"You landed on your own railway: {self.name}."]
        if self.offer_moves and self._confirm(
            ask, "Move to another railway you own? (y/n): "
        ):
            messages += self.move_to_owned_railway(player, ask)
        return messages

    def move_to_owned_railway(
        self, player: Player, ask: Ask | None = None
    ) -> list[str]:
        """Offer each other owned railway in turn and move to the first accepted."""
        current = player.position
        for railway in list(player.railways):
            if railway.position == current:
                continue
            prompt = (
                f"Do you want to move to {railway.name} at position "
                f"{railway.position}? (y/n): "
            )
            if self._confirm(ask, prompt):
                player.set_position(railway.position)
                return [f"Moved to your railway: {railway.name}"] + railway.on_land(
                    player, ask
                )
        return ["No railway selected or no other owned railway available."]

    def mortgage(self, player: Player) -> list[str]:
        if self.owner is not player:
            return ["You Do not own it."]
        if self.mortgaged:
            return ["Already mortgaged."]
        if player.in_jail:
            return ["You can't mortgage from jail."]
        self.mortgaged = True
        value = self.price // 2
        player.add_money(value)
        player.railway_count -= 1
        return [f"{self.name}Property mortgaged for ${value}."]

    def unmortgage(self, player: Player) -> list[str]:
        if self.owner is not player or not self.mortgaged:
            return ["Unmortgage not allowed."]
        if not player.deduct_money(int(self.price * UNMORTGAGE_RATE)):
            return ["Not enough money to unmortgage."]
        self.mortgaged = False
        player.railway_count += 1
        return ["Unmortgaged successfully."]

    def describe(self) -> str:
        return (
            f"{self._header()}, Price: ${self.price}, Rent: ${self.rent}, "
            f"Owned: {self._yes_no(self.bought)}, "
            f"Mortgaged: {self._yes_no(self.mortgaged)}, "
            f"Owner: {self.owner.name if self.owner else 'None'}"
        )