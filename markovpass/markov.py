#!/usr/bin/env python3
"""
Character-Level Markov Chain
============================
Learns, for every context of ``ngram_length`` preceding symbols, how often
each next symbol followed it in the training words.

Symbols:
--------
- Letters are plain one-character strings ('a'..'z').
- Marker.START pads the front of every word so its first letters have a
  context to follow.
- Marker.END is the transition taken when a word finishes. It only ever
  appears as a next symbol, never inside a context.

Example for order 2 and the word "cat":

    (START, START) -> 'c'
    (START, 'c')   -> 'a'
    ('c', 'a')     -> 't'
    ('a', 't')     -> END
"""

import enum
import logging
from bisect import bisect_right
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from itertools import accumulate
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple, Union

from markovpass.config import validate_ngram_length
from markovpass.corpus import tokenize
from markovpass.settings import get_setting

logger = logging.getLogger(__name__)


# =============================================================================
# Symbols and Contexts
# =============================================================================

class Marker(enum.Enum):
    """Non-letter symbols of the chain alphabet."""
    START = "^"
    END = "$"

    def __repr__(self) -> str:
        return f"Marker.{self.name}"


Symbol = Union[str, Marker]
Context = Tuple[Symbol, ...]


def start_context(ngram_length: int) -> Context:
    """Context at the beginning of every word: all start markers."""
    return (Marker.START,) * ngram_length


def advance(context: Context, symbol: Symbol) -> Context:
    """Slide the window one symbol to the right."""
    return context[1:] + (symbol,)


# =============================================================================
# Weighted Distribution
# =============================================================================

@dataclass(frozen=True)
class Distribution:
    """
    Observed next-symbol counts for one context.

    ``cumulative[i]`` is the sum of ``counts[:i + 1]``, so a draw ``r`` in
    ``[0, total)`` selects the first index whose cumulative count exceeds it.
    """
    symbols: Tuple[Symbol, ...]
    counts: Tuple[int, ...]
    cumulative: Tuple[int, ...] = field(repr=False)
    total: int

    @classmethod
    def from_counter(cls, counter: Counter) -> 'Distribution':
        # Insertion order keeps draws reproducible for a seeded RNG
        symbols = tuple(counter.keys())
        counts = tuple(counter[s] for s in symbols)
        if not counts or any(c < 1 for c in counts):
            raise ValueError(f"Distribution counts must be >= 1: {counts}")
        cumulative = tuple(accumulate(counts))
        return cls(symbols=symbols, counts=counts,
                   cumulative=cumulative, total=cumulative[-1])

    def __len__(self) -> int:
        return len(self.symbols)

    def __contains__(self, symbol) -> bool:
        return symbol in self.symbols

    def count(self, symbol: Symbol) -> int:
        try:
            return self.counts[self.symbols.index(symbol)]
        except ValueError:
            return 0

    def probability(self, symbol: Symbol) -> float:
        return self.count(symbol) / self.total

    def probabilities(self) -> dict:
        return {s: c / self.total for s, c in zip(self.symbols, self.counts)}

    def index_for(self, r: int) -> int:
        """Cumulative-weight inversion of ``r`` in ``[0, total)``."""
        if not 0 <= r < self.total:
            raise ValueError(f"Draw {r} outside [0, {self.total})")
        return bisect_right(self.cumulative, r)

    def as_dict(self) -> dict:
        return dict(zip(self.symbols, self.counts))


# =============================================================================
# Chain Model
# =============================================================================

@dataclass(frozen=True)
class ChainModel:
    """Immutable transition table of a trained chain."""
    ngram_length: int
    transitions: Mapping[Context, Distribution] = field(default_factory=dict)
    word_count: int = 0

    def __post_init__(self):
        validate_ngram_length(self.ngram_length)
        object.__setattr__(self, 'transitions',
                           MappingProxyType(dict(self.transitions)))

    @classmethod
    def from_words(cls, words: Iterable[str], ngram_length: int) -> 'ChainModel':
        return MarkovTrainer(ngram_length).train(words)

    @classmethod
    def from_text(cls, text: str, ngram_length: int,
                  min_word_length: int) -> 'ChainModel':
        return cls.from_words(tokenize(text, min_word_length), ngram_length)

    @property
    def start_context(self) -> Context:
        return start_context(self.ngram_length)

    @property
    def is_empty(self) -> bool:
        return not self.transitions

    @property
    def has_entropy(self) -> bool:
        """True if some context has more than one possible next symbol."""
        return any(len(dist) > 1 for dist in self.transitions.values())

    def distribution(self, context: Context) -> Optional[Distribution]:
        return self.transitions.get(tuple(context))

    def __contains__(self, context) -> bool:
        return tuple(context) in self.transitions

    def __len__(self) -> int:
        return len(self.transitions)


class MarkovTrainer:
    """Builds a ChainModel from a word list in a single pass."""

    def __init__(self, ngram_length: int = 3):
        self.ngram_length = validate_ngram_length(ngram_length)

    def train(self, words: Iterable[str]) -> ChainModel:
        """Train a chain on a list of cleaned words."""
        n = self.ngram_length
        counters = defaultdict(Counter)
        word_count = 0

        for word in words:
            word_count += 1
            padded = (Marker.START,) * n + tuple(word) + (Marker.END,)

            # Window stops before it would contain END
            for i in range(len(padded) - n):
                context = padded[i:i + n]
                counters[context][padded[i + n]] += 1

        transitions = {
            context: Distribution.from_counter(counter)
            for context, counter in counters.items()
        }
        model = ChainModel(ngram_length=n, transitions=transitions,
                           word_count=word_count)

        if model.is_empty:
            logger.warning("Chain trained on an empty corpus; generation will fail")
        else:
            small = get_setting("corpus.small_corpus_words", 0) or 0
            if word_count < small:
                logger.warning(f"Small corpus: {word_count} words for order {n}")
            logger.debug(f"Trained order-{n} chain: {word_count} words, "
                         f"{len(model)} contexts")
        return model


__all__ = [
    "Marker",
    "Symbol",
    "Context",
    "start_context",
    "advance",
    "Distribution",
    "ChainModel",
    "MarkovTrainer",
]
