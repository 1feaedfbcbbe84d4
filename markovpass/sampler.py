#!/usr/bin/env python3
"""
Weighted Sampler
================
Draws next symbols from a chain and charges each draw its exact entropy.

A draw from a context with counts ``c_1..c_k`` and total ``T`` picks an
integer ``r`` uniformly in ``[0, T)`` and inverts the cumulative counts, so
symbol ``i`` is chosen with probability ``c_i / T``. The entropy charged is
``-log2(c_i / T)``, computed from the same two integers.

Randomness comes from the OS entropy pool (``secrets.SystemRandom``) unless
another generator with a ``randrange`` method is supplied, e.g. a seeded
``random.Random`` for reproducible tests.
"""

import math
import secrets
from dataclasses import dataclass

from markovpass.errors import ModelTooSparseError
from markovpass.markov import ChainModel, Context, Symbol


def default_rng():
    """Cryptographically secure generator backed by os.urandom()."""
    return secrets.SystemRandom()


@dataclass(frozen=True)
class Draw:
    """One sampling step: where it happened, what came out, what it cost."""
    context: Context
    symbol: Symbol
    count: int
    total: int

    @property
    def probability(self) -> float:
        return self.count / self.total

    @property
    def bits(self) -> float:
        return -math.log2(self.count / self.total)


class Sampler:
    """Samples symbols from a ChainModel."""

    def __init__(self, model: ChainModel, rng=None):
        self.model = model
        self.rng = rng if rng is not None else default_rng()

    def draw(self, context: Context) -> Draw:
        """
        Draw the symbol following ``context``.

        Raises:
            ModelTooSparseError: if the context was never seen in training
        """
        dist = self.model.distribution(context)
        if dist is None:
            raise ModelTooSparseError(tuple(context))

        index = dist.index_for(self.rng.randrange(dist.total))
        return Draw(context=tuple(context), symbol=dist.symbols[index],
                    count=dist.counts[index], total=dist.total)


__all__ = [
    "Draw",
    "Sampler",
    "default_rng",
]
