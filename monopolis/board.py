"""The standard forty-square board."""

from __future__ import annotations

import random
from collections.abc import Iterator

from monopolis.player import BOARD_SIZE
from monopolis.property import Property
from monopolis.railway import Railway
from monopolis.tiles import CommunityChest, FreeParking, Go, GoToJail, Jail, Tax, Tile
from monopolis.utility import Utility


class Board:
    """The ring of tiles players move around."""

    def __init__(self, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self._tiles: list[Tile] = [
            Go("GO", 0),
            Property("Mediterranean Avenue", 1, 60, 12, "A", 2),
            CommunityChest("Community Chest", 2, rng),
            Property("Baltic Avenue", 3, 60, 12, "A", 2),
            Tax("Income Tax", 4, 200),
            Railway("Reading Railroad", 5, 200, 25),
            Property("Oriental Avenue", 6, 100, 15, "B", 3),
            CommunityChest("Chance", 7, rng),
            Property("Vermont Avenue", 8, 100, 14, "B", 3),
            Property("Connecticut Avenue", 9, 120, 16, "B", 3),
            Jail("Just Visiting / In Jail", 10),
            Property("St. Charles Place", 11, 140, 19, "C", 3),
            Utility("Electric Company", 12, 150),
            Property("States Avenue", 13, 140, 19, "C", 3),
            Property("Virginia Avenue", 14, 160, 12, "C", 3),
            Railway("Pennsylvania Railroad", 15, 200, 25),
            Property("St. James Place", 16, 180, 22, "D", 3),
            CommunityChest("Community Chest", 17, rng),
            Property("Tennessee Avenue", 18, 180, 22, "D", 3),
            Property("New York Avenue", 19, 200, 25, "D", 3),
            FreeParking("Free Parking", 20),
            Property("Kentucky Avenue", 21, 220, 28, "E", 3),
            CommunityChest("Chance", 22, rng),
            Property("Indiana Avenue", 23, 220, 28, "E", 3),
            Property("Illinois Avenue", 24, 240, 30, "E", 3),
            Railway("B&O Railroad", 25, 200, 25),
            Property("Atlantic Avenue", 26, 260, 32, "F", 3),
            Property("Ventnor Avenue", 27, 260, 32, "F", 3),
            Utility("Water Works", 28, 150),
            Property("Marvin Gardens", 29, 280, 34, "F", 3),
            GoToJail("Go To Jail", 30),
            Property("Pacific Avenue", 31, 300, 26, "G", 3),
            Property("North Carolina Avenue", 32, 300, 36, "G", 3),
            CommunityChest("Community Chest", 33, rng),
            Property("Pennsylvania Avenue", 34, 320, 38, "G", 3),
            Railway("Short Line", 35, 200, 25),
            CommunityChest("Chance", 36, rng),
            Property("Park Place", 37, 350, 40, "H", 2),
            Tax("Luxury Tax", 38, 100),
            Property("Boardwalk", 39, 400, 50, "H", 2),
        ]

    def tile(self, position: int) -> Tile:
        """The tile at ``position``, wrapping around the board."""
        return self._tiles[position % BOARD_SIZE]

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)