"""Shared fixtures for the markovpass test suite."""

import random
import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


# Opening of Pride and Prejudice (public domain)
AUSTEN = """
It is a truth universally acknowledged, that a single man in possession
of a good fortune, must be in want of a wife.

However little known the feelings or views of such a man may be on his
first entering a neighbourhood, this truth is so well fixed in the minds
of the surrounding families, that he is considered the rightful property
of some one or other of their daughters.

"My dear Mr. Bennet," said his lady to him one day, "have you heard that
Netherfield Park is let at last?"

Mr. Bennet replied that he had not.

"But it is," returned she; "for Mrs. Long has just been here, and she
told me all about it."

Mr. Bennet made no answer.

"Do you not want to know who has taken it?" cried his wife impatiently.

"You want to tell me, and I have no objection to hearing it."

This was invitation enough.
"""


class ScriptedRandom:
    """Random source that replays a fixed list of ``randrange`` results."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, stop):
        value = self.values.pop(0)
        assert 0 <= value < stop, f"scripted draw {value} outside [0, {stop})"
        self.calls.append(stop)
        return value


@pytest.fixture
def corpus_text():
    return AUSTEN


@pytest.fixture
def rng():
    """Seeded generator for reproducible walks."""
    return random.Random(1813)
