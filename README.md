# monopolis

A small engine for a classic property-trading board game. It models the
40-tile board, the players and their money, and what happens when a player
lands on each kind of tile. It has no dependencies beyond the standard
library and supports Python 3.10 and later.

## Modules

- `monopolis.player` – `Player`, a dataclass holding name, money (5000 by
  default), position, jail state, last dice roll and owned properties,
  railways and utilities.
- `monopolis.tiles` – the abstract `Tile` and the simple squares: `Go`,
  `Jail`, `FreeParking`, `GoToJail`, `Tax` and `CommunityChest` (also used
  for the Chance squares).
- `monopolis.property` – `Property`, a street in a colour set.
- `monopolis.railway` – `Railway`.
- `monopolis.utility` – `Utility`.
- `monopolis.board` – `Board`, the 40 tiles in order.
- `monopolis.game` – `Game`, which seats players, takes turns, runs the
  asset-management menus and renders a text board.

## Rules as implemented

- **Properties** can be bought when landed on. Rent is the base rent plus
  half the base rent (rounded down) for each house; a hotel counts as five.
  Houses can be built (at half the price each) once the player owns the
  whole colour set; on four houses a hotel can be built. Houses sell back
  for a quarter of the price each, and a hotel sells back down to four
  houses. Mortgaging pays half the price; unmortgaging costs 60% of it.
- **Railways** charge $50 times the owner's railway count. Buying a railway
  adds two to that count, mortgaging one takes one off and unmortgaging puts
  it back. If a railway's `offer_moves` is set, an owner landing on it is
  offered a move to another railway they own.
- **Utilities** charge the visitor's last dice total times four if the
  owner's utility count is one, and times ten otherwise.
- **Tax** tiles take their fixed amount if the player can pay it.
- **Community Chest / Chance** draw one of seven cards at random: advance to
  GO, go to jail, collect $50, $150 or $200, or pay $15 or $200.
- **Go To Jail** sends the player to position 10. A jailed player leaves on
  rolling a double, or after failing to do so on two earlier turns.
- Passing GO during a turn (ending on a lower position than the start)
  adds $200.
- A payment the player cannot afford is simply not made. A player is
  bankrupt once their money is negative and every holding is mortgaged with
  no houses left standing. `Game.winner()` returns the only player still
  not bankrupt, or `None`.

## Playing from code

Every decision a player makes (buy this? build how many houses? mortgage?)
goes through an `ask` callable that receives a prompt and returns the answer
as a string. Pass `input` for interactive play, or a function of your own
for scripted play. Without an `ask`, every question is answered "no".
Card draws and unspecified dice come from the `rng` you supply, so games can
be replayed exactly.

```python
import random

from monopolis.game import Game

game = Game(ask=input, rng=random.Random(7))
game.add_players(["Ada", "Grace"])   # 2 to 8 names, else ValueError

print(game.render_board())

ada = game.players[0]
for line in game.take_turn(ada, 3, 4):   # dice given explicitly
    print(line)

for line in game.take_turn(game.players[1]):   # dice rolled from rng
    print(line)

print(game.winner())
```

Methods return the messages they produce as lists of strings rather than
printing them. At the start of a turn a player who is not in jail goes
through `manage_buildings`, `manage_railways` and `manage_utilities`, which
can also be called directly.

## Working with the pieces directly

```python
import random

from monopolis.board import Board
from monopolis.player import Player

board = Board(random.Random(0))
print(len(board))                 # 40
print(board.tile(39).describe())  # Boardwalk

player = Player("Ada")
player.move(7)
print(player.position)            # 7
player.go_to_jail()
print(player.position)            # 10
```

Each tile has `describe()`, returning a one-line summary, and
`on_land(player, ask)`, which applies the tile's effect and returns its
messages.

## What the package does not do

There is no command to run and no built-in game loop: the caller decides
whose turn it is, calls `Game.take_turn`, and stops when `Game.winner()`
returns a player. Games are not saved or loaded.