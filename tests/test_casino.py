import random

import pytest

from deskapps.casino import (
    BetTooLarge,
    Game,
    GuessOutOfRange,
    RoundResult,
    draw_line,
    main,
    rules_text,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        assert (low, high) == (1, 10)
        return self.value


def test_win_pays_ten_times():
    game = Game(100, _FixedRng(3))
    result = game.play_round(10, 3)
    assert result.won
    assert result.change == 10 * 10
    assert game.balance == 100 + 10 * 10
    assert result.balance == game.balance


def test_loss_subtracts_bet():
    game = Game(100, _FixedRng(4))
    result = game.play_round(10, 3)
    assert not result.won
    assert result.dice == 4
    assert game.balance == 100 - 10


def test_bet_too_large():
    game = Game(5, _FixedRng(1))
    with pytest.raises(BetTooLarge):
        game.play_round(6, 1)
    assert game.balance == 5


@pytest.mark.parametrize("guess", [0, 11, -1])
def test_guess_out_of_range(guess):
    game = Game(50, _FixedRng(1))
    with pytest.raises(GuessOutOfRange):
        game.play_round(1, guess)


def test_betting_everything_and_losing_leaves_broke():
    game = Game(20, _FixedRng(9))
    game.play_round(20, 2)
    assert game.broke


def test_random_dice_in_range():
    game = Game(10**6, random.Random(7))
    for _ in range(200):
        result = game.play_round(1, 5)
        assert 1 <= result.dice <= 10
        assert result.won == (result.dice == 5)


def test_round_result_change_on_loss():
    result = RoundResult(bet=7, guess=1, dice=2, won=False, balance=0)
    assert result.change == -7


def test_draw_line():
    assert draw_line(5, "=") == "=====\n"


def test_rules_text_mentions_rules():
    text = rules_text()
    assert "Choose any number between 1 to 10" in text
    assert "10 times the money you bet" in text


def test_main_game_until_broke(monkeypatch, capsys):
    answers = iter(["Ann", "10", "50", "10", "11", "5"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    monkeypatch.setattr(random.Random, "randint", lambda self, a, b: 1)
    assert main() == 0
    out = capsys.readouterr().out
    assert "Your betting amount is more than your current balance" in out
    assert "You have no money to play" in out
    assert "Your balance amount is $0" in out