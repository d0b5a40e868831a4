"""Board tiles that need no ownership: corners, taxes and card squares."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum

from monopolis.player import Player

Ask = Callable[[str], str]

UNMORTGAGE_RATE = 0.6


class Tile(ABC):
    """A square on the board.

    ``on_land`` applies the square's effect and returns the messages to show;
    ``ask`` is used to put questions to the player and returns the answer.
    """

    label = ""

    def __init__(self, name: str, position: int) -> None:
        self.name = name
        self.position = position

    @abstractmethod
    def on_land(self, player: Player, ask: Ask | None = None) -> list[str]:
        """Apply the effect of landing here and return messages."""

    @abstractmethod
    def describe(self) -> str:
        """A one-line description of the tile."""

    def _header(self) -> str:
        return f"[{self.label}] Name: {self.name}, Position: {self.position}"

    @staticmethod
    def _confirm(ask: Ask | None, prompt: str) -> bool:
        """Ask a yes/no question; no answerer means no."""
        if ask is None:
            return False
        return ask(prompt).strip()[:1] in ("y", "Y")

    @staticmethod
    def _ask_int(ask: Ask | None, prompt: str) -> int | None:
        """Ask for a whole number; None if there is no usable answer."""
        if ask is None:
            return None
        try:
            return int(ask(prompt).strip())
        except ValueError:
            return None

    @staticmethod
    def _transfer(payer: Player, payee: Player, amount: int) -> bool:
        """Move money between players if the payer can afford it."""
        if not payer.deduct_money(amount):
            return False
        payee.add_money(amount)
        return True

    @staticmethod
    def _yes_no(flag: bool) -> str:
        return "Yes" if flag else "No"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.position})"


class Go(Tile):
    label = "GO"

    def on_land(self, player: Player, ask: Ask | None = None) -> list[str]:
        return [f"You are At {self.name}"]

    def describe(self) -> str:
        return self._header()


class Jail(Tile):
    label = "JAIL"

    def on_land(self, player: Player, ask: Ask | None = None) -> list[str]:
        return ["You Are Just Visiting Jail."]

    def describe(self) -> str:
        return self._header()


class FreeParking(Tile):
    label = "FREE PARKING"

    def on_land(self, player: Player, ask: Ask | None = None) -> list[str]:
        return [f"{player.name} Is At {self.name} Position : {self.position}"]

    def describe(self) -> str:
        return self._header()


class GoToJail(Tile):
    label = "GO TO JAIL"

    def on_land(self, player: Player, ask: Ask | None = None) -> list[str]:
        player.go_to_jail()
        return [
            f"Player {player.name} is sent to jail.",
            f"{player.name} sent To Jail.",
        ]

    def describe(self) -> str:
        return self._header()


class Tax(Tile):
    label = "TAX"

    def __init__(self, name: str, position: int, amount: int) -> None:
        super().__init__(name, position)
        self.amount = amount

    def on_land(self, player: Player, ask: Ask | None = None) -> list[str]:
        paid = player.deduct_money(self.amount)
        return [
            f"You Landed On {self.name} Pay : {self.amount}",
            f"{self.amount} Deducted from your account "
            if paid
            else "Cannot Deduct.insufficient balance.",
        ]

    def describe(self) -> str:
        return f"{self._header()}, Tax Amount: ${self.amount}"


class Card(IntEnum):
    ADVANCE_TO_GO = 1
    GO_TO_JAIL = 2
    DIVIDEND = 3
    LOAN_MATURES = 4
    POOR_TAX = 5
    BIRTHDAY = 6
    CORRUPTION_FINE = 7


_CARD_TEXT = {
    Card.ADVANCE_TO_GO: "Move To Go and Collect 200.",
    Card.GO_TO_JAIL: "Go To Jail.",
    Card.DIVIDEND: "Bank pays you dividend of $50",
    Card.LOAN_MATURES: "Your building and loan matures.Collect $150.",
    Card.POOR_TAX: "Pay poor tax of $15",
    Card.BIRTHDAY: "Its Your Birthday.Collect 200.",
    Card.CORRUPTION_FINE: "Your Have been found Guilty in corruption.Pay 200.",
}

_CARD_MONEY = {
    Card.DIVIDEND: 50,
    Card.LOAN_MATURES: 150,
    Card.POOR_TAX: -15,
    Card.BIRTHDAY: 200,
    Card.CORRUPTION_FINE: -200,
}


class CommunityChest(Tile):
    """A card square; also used for the Chance squares."""

    label = "COMMUNITY CHEST"

    def __init__(
        self, name: str, position: int, rng: random.Random | None = None
    ) -> None:
        super().__init__(name, position)
        self.rng = rng if rng is not None else random.Random()
        self.last_card: Card | None = None

    def draw_card(self) -> Card:
        self.last_card = Card(self.rng.randint(1, len(Card)))
        return self.last_card

    def apply_card(self, card: Card, player: Player) -> list[str]:
        messages = [_CARD_TEXT[card]]
        if card is Card.ADVANCE_TO_GO:
            player.move(0)
        elif card is Card.GO_TO_JAIL:
            player.go_to_jail()
            messages.append(f"Player {player.name} is sent to jail.")
        else:
            amount = _CARD_MONEY[card]
            if amount >= 0:
                player.add_money(amount)
            else:
                player.deduct_money(-amount)
        return messages

    def on_land(self, player: Player, ask: Ask | None = None) -> list[str]:
        return self.apply_card(self.draw_card(), player)

    def describe(self) -> str:
        return self._header()