import pytest

from monopolis.player import Player
from monopolis.utility import Utility


def scripted(*answers):
    replies = iter(answers)
    return lambda prompt: next(replies)


@pytest.fixture
def electric():
    return Utility("Electric Company", 12, 150)


@pytest.fixture
def water():
    return Utility("Water Works", 28, 150)


def test_buy_utility(electric):
    alice = Player("Alice")
    start = alice.money
    messages = electric.on_land(alice, scripted("y"))
    assert electric.owner is alice
    assert alice.money == start - electric.price
    assert alice.utilities == [electric]
    assert alice.utility_count == 1
    assert messages[-1] == "Utility bought!"


def test_decline_utility(electric):
    alice = Player("Alice")
    electric.on_land(alice, scripted("n"))
    assert electric.owner is None
    assert alice.utility_count == 0


def test_cannot_buy_without_money(electric):
    poor = Player("Poor", money=100)
    messages = electric.on_land(poor, scripted("y"))
    assert electric.owner is None
    assert poor.money == 100
    assert "Not enough money to buy utility." in messages


def test_rent_with_one_utility(electric):
    alice, bob = Player("Alice"), Player("Bob")
    electric.on_land(alice, scripted("y"))
    bob.last_roll = (3, 4)
    a0, b0 = alice.money, bob.money
    electric.on_land(bob)
    assert b0 - bob.money == 28
    assert alice.money - a0 == 28


def test_rent_with_both_utilities(electric, water):
    alice, bob = Player("Alice"), Player("Bob")
    electric.on_land(alice, scripted("y"))
    water.on_land(alice, scripted("y"))
    bob.last_roll = (3, 4)
    b0 = bob.money
    water.on_land(bob)
    assert b0 - bob.money == 70


def test_no_rent_without_roll(electric):
    alice, bob = Player("Alice"), Player("Bob")
    electric.on_land(alice, scripted("y"))
    start = bob.money
    assert electric.on_land(bob) == []
    assert bob.money == start


def test_no_rent_when_mortgaged(electric):
    alice, bob = Player("Alice"), Player("Bob")
    electric.on_land(alice, scripted("y"))
    electric.mortgage(alice)
    bob.last_roll = (6, 6)
    start = bob.money
    electric.on_land(bob)
    assert bob.money == start


def test_mortgage_and_unmortgage(electric):
    alice = Player("Alice")
    electric.on_land(alice, scripted("y"))
    start = alice.money
    electric.mortgage(alice)
    assert electric.mortgaged is True
    assert alice.utility_count == 0
    assert alice.money - start == electric.price // 2
    assert electric.mortgage(alice) == ["Already mortgaged."]
    electric.unmortgage(alice)
    assert electric.mortgaged is False
    assert alice.utility_count == 1


def test_mortgage_refusals(electric):
    alice, bob = Player("Alice"), Player("Bob")
    assert electric.mortgage(bob) == ["You Do not own it."]
    electric.on_land(alice, scripted("y"))
    alice.go_to_jail()
    assert electric.mortgage(alice) == ["You can't mortgage from jail."]
    assert electric.unmortgage(alice) == ["Unmortgage not allowed."]


def test_describe(electric):
    assert electric.describe().startswith("[UTILITY] Name: Electric Company")
    assert electric.describe().endswith("Owner: None")
    alice = Player("Alice")
    electric.on_land(alice, scripted("y"))
    assert electric.describe().endswith("Owner: Alice")


def test_bankrupt_when_utility_mortgaged(electric):
    alice = Player("Alice")
    electric.on_land(alice, scripted("y"))
    alice.money = -1
    assert alice.is_bankrupt() is False
    electric.mortgaged = True
    assert alice.is_bankrupt() is True