"""A number-guessing betting game."""

from __future__ import annotations

import random
from dataclasses import dataclass

PAYOUT_MULTIPLIER = 10
LOWEST = 1
HIGHEST = 10


class BetTooLarge(ValueError):
    """Raised when a bet exceeds the current balance."""


class GuessOutOfRange(ValueError):
    """Raised when the guess is not between 1 and 10."""


@dataclass(frozen=True)
class RoundResult:
    """Outcome of one round."""

    bet: int
    guess: int
    dice: int
    won: bool
    balance: int

    @property
    def change(self) -> int:
        return self.bet * PAYOUT_MULTIPLIER if self.won else -self.bet


class Game:
    """A player's balance and the number draws."""

    def __init__(self, balance: int, rng: random.Random | None = None) -> None:
        self.balance = balance
        self._rng = rng or random.Random()

    @property
    def broke(self) -> bool:
        return self.balance == 0

    def play_round(self, bet: int, guess: int) -> RoundResult:
        if bet > self.balance:
            raise BetTooLarge("Your betting amount is more than your current balance")
        if not LOWEST <= guess <= HIGHEST:
            raise GuessOutOfRange(f"Should be between {LOWEST} and {HIGHEST}")
        dice = self._rng.randint(LOWEST, HIGHEST)
        won = dice == guess
        self.balance += bet * PAYOUT_MULTIPLIER if won else -bet
        return RoundResult(bet, guess, dice, won, self.balance)


def draw_line(n: int, symbol: str) -> str:
    return symbol * n + "\n"


def rules_text() -> str:
    return (
        "\n\n"
        + draw_line(80, "_")
        + "\n\t1. Choose any number between 1 to 10\n"
        + "\n\t2. If you win you will get 10 times the money you bet\n"
        + "\n\t3. If you bet on the wrong number you will lose your betting amount\n\n"
        + draw_line(80, "_")
    )


def _ask_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            print("Please enter a whole number")


def _play(game: Game, name: str) -> None:
    while True:
        print(rules_text())
        print(f"\n\nYour Current balance is ${game.balance}")
        while True:
            bet = _ask_int(f"{name}, Enter money to bet: $")
            if bet <= game.balance:
                break
            print("Your betting amount is more than your current balance\n\nRe-enter data")
        while True:
            guess = _ask_int("Guess your number to bet between 1 to 10 :")
            try:
                result = game.play_round(bet, guess)
                break
            except GuessOutOfRange:
                print("Please check the number!! Should be between 1 and 10\n\nRe-enter data")
        if result.won:
            print(f"\n\nGood Luck!! you won ${result.change}")
        else:
            print(f"Bad luck this time!! You lost ${bet}")
        print(f"\nThe winning number was: {result.dice}")
        print(f"\n{name}, You have ${game.balance}")
        if game.broke:
            print("You have no money to play")
            return
        again = input("\n\n--->Do you want to play again(y/n)? ").strip()
        if again[:1] not in ("y", "Y"):
            return


def main(argv: list[str] | None = None) -> int:
    print(draw_line(60, "_") + "\n\n\n\t\tCASINO GAME\n\n\n\n" + draw_line(60, "_"))
    game = None
    try:
        name = input("\n\nEnter Your Name: ").strip()
        game = Game(_ask_int("\n\nEnter Deposit amount to play game: $"))
        _play(game, name)
    except EOFError:
        pass
    balance = game.balance if game else 0
    print("\n\n\n" + draw_line(70, "_"))
    print(f"\n\nThanks for playing game. Your balance amount is ${balance}\n\n")
    print(draw_line(70, "="), end="")
    return 0