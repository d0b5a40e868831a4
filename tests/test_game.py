import random

import pytest

from monopolis.game import Game


def scripted(*answers):
    it = iter(answers)
    return lambda prompt: next(it)


def decline(prompt):
    return "n"


@pytest.fixture
def game():
    g = Game(decline, random.Random(3))
    g.add_players(["Ann", "Bob"])
    return g


def test_draw_cell_starts_with_bar_and_text():
    cell = Game().draw_cell("GO")
    assert cell.startswith("|GO")
    assert cell[1:].strip() == "GO"


def test_render_board_layout():
    lines = Game().render_board().split("\n")
    assert set(lines[0]) == {"-"}
    assert lines[0] == lines[-1]
    assert lines[1].startswith("|GO")
    assert lines[-2].startswith("|Start")
    assert all(line.endswith("|") for line in lines[1:-1])
    assert len(lines) == 2 + 1 + 9 + 1


@pytest.mark.parametrize("names", [["solo"], [f"p{i}" for i in range(9)]])
def test_add_players_rejects_bad_counts(names):
    with pytest.raises(ValueError):
        Game().add_players(names)


def test_add_players_seats_players():
    g = Game()
    g.add_players(["Ann", "Bob", "Cy"])
    assert [p.name for p in g.players] == ["Ann", "Bob", "Cy"]


def test_turn_on_income_tax(game):
    ann = game.players[0]
    game.take_turn(ann, 1, 3)
    assert ann.position == 4
    assert ann.money == 5000 - 200
    assert ann.last_roll == (1, 3)


def test_passing_go_pays_reward(game):
    ann = game.players[0]
    ann.set_position(38)
    messages = game.take_turn(ann, 1, 2)
    assert ann.position == 1
    assert ann.money == 5000 + 200
    assert "You Have passed GO. 200 Added." in messages


def test_go_to_jail_tile_does_not_pay_go(game):
    ann = game.players[0]
    ann.set_position(26)
    game.take_turn(ann, 1, 3)
    assert ann.in_jail
    assert ann.position == 10
    assert ann.money == 5000


def test_jail_without_double_stays(game):
    ann = game.players[0]
    ann.go_to_jail()
    game.take_turn(ann, 2, 3)
    assert ann.in_jail
    assert ann.position == 10
    assert ann.jail_turns == 1


def test_jail_double_releases(game):
    ann = game.players[0]
    ann.go_to_jail()
    game.take_turn(ann, 3, 3)
    assert not ann.in_jail
    assert ann.position == 16


def test_jail_released_after_serving_turns(game):
    ann = game.players[0]
    ann.go_to_jail()
    game.take_turn(ann, 2, 3)
    game.take_turn(ann, 2, 3)
    assert ann.in_jail
    game.take_turn(ann, 2, 3)
    assert not ann.in_jail
    assert ann.jail_turns == 0
    assert ann.position == 15


def test_bankrupt_player_skips_turn(game):
    ann = game.players[0]
    ann.money = -1
    assert game.take_turn(ann, 1, 1) == []
    assert ann.position == 0


def test_winner_is_last_player_standing(game):
    ann, bob = game.players
    assert game.winner() is None
    ann.money = -1
    assert game.winner() is bob


def test_manage_buildings_builds_houses(game):
    ann = game.players[0]
    first, second = game.board.tile(1), game.board.tile(3)
    for prop in (first, second):
        prop.owner = ann
        ann.add_property(prop)
    game.ask = scripted("1", "y", "2", "n", "5")
    game.manage_buildings(ann)
    assert first.houses == 2
    assert second.houses == 0
    assert ann.money + first.houses * (first.price // 2) == 5000


def test_manage_railways_mortgages(game):
    ann = game.players[0]
    railway = game.board.tile(5)
    railway.owner = ann
    ann.add_railway(railway)
    game.ask = scripted("1", "y", "3")
    game.manage_railways(ann)
    assert railway.mortgaged
    assert ann.money == 5000 + railway.price // 2


def test_manage_utilities_mortgage_then_unmortgage(game):
    ann = game.players[0]
    utility = game.board.tile(12)
    utility.owner = ann
    ann.add_utility(utility)
    ann.utility_count = 1
    game.ask = scripted("1", "y", "2", "y", "3")
    game.manage_utilities(ann)
    assert not utility.mortgaged
    assert ann.utility_count == 1
    assert ann.money < 5000


def test_manage_without_assets_asks_nothing(game):
    ann = game.players[0]
    game.ask = scripted()
    assert game.manage_buildings(ann) == []
    assert game.manage_railways(ann) == []
    assert game.manage_utilities(ann) == []