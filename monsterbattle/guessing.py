"""Guess a three-digit number, scored in hits and blows."""

from __future__ import annotations

import random
import sys
from typing import Callable, Iterator, Sequence

DIGITS = 3


def generate_answer(rng: random.Random) -> tuple[int, ...]:
    """Draw the secret digits; the first two are always different."""
    answer = [rng.randrange(10) for _ in range(DIGITS)]
    while answer[0] == answer[1]:
        answer[1] = rng.randrange(10)
    while answer[0] == answer[2] and answer[1] == answer[2]:
        answer[2] = rng.randrange(10)
    return tuple(answer)


def score_guess(answer: Sequence[int], guess: Sequence[int]) -> tuple[int, int]:
    """Return (hits, blows).

    A hit is a digit in the right place; a blow is each pairing of an answer
    digit with an equal guess digit at a different place.
    """
    if len(answer) != len(guess):
        raise ValueError(f"guess has {len(guess)} digits, answer has {len(answer)}")
    hits = sum(1 for wanted, given in zip(answer, guess) if wanted == given)
    blows = sum(
        1
        for i, wanted in enumerate(answer)
        for j, given in enumerate(guess)
        if i != j and wanted == given
    )
    return hits, blows


def _atoi(text: str) -> int:
    """Read a leading integer the lenient way: no number gives 0."""
    stripped = text.lstrip()
    sign = 1
    if stripped[:1] in ("+", "-"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    digits = ""
    for char in stripped:
        if not char.isdigit() or not char.isascii():
            break
        digits += char
    return sign * int(digits) if digits else 0


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("no more input") from None


def _play(rng: random.Random, tokens: Iterator[str], write: Callable[[str], object]) -> bool:
    """Run one game; True when the number was found, False when the player stops."""
    write("*** Number Guessing Game (Level 2) ***\n")
    write("Try to guess the 3-digit number.\n")
    write("Note: Each digit is unique (no duplicates).\n")
    answer = generate_answer(rng)
    for digit in answer:
        write(f"{digit}\n")
    while True:
        guess = []
        for place in range(1, DIGITS + 1):
            write(f"{place}桁目の数字を入力してください:")
            guess.append(_atoi(_next_token(tokens)))
        for digit in guess:
            write(f"{digit}\n")
        hits, blows = score_guess(answer, guess)
        write(f"{hits} HIT!, {blows} BLOW!\n")
        if hits == DIGITS:
            write("Clear!\n")
            return True
        write("Do you want to try again? (0: Finish, 1~: Continue):\n")
        if _atoi(_next_token(tokens)) == 0:
            return False


def _input_tokens() -> Iterator[str]:
    while True:
        yield from input().split()


def main(argv: Sequence[str] | None = None) -> int:
    try:
        _play(random.Random(), _input_tokens(), sys.stdout.write)
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())