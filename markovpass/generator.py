#!/usr/bin/env python3
"""
Passphrase Generator
====================
Walks a trained chain to produce words, and strings words together until
a passphrase carries at least the requested entropy.

Word walk:
----------
Start from the all-START context, draw a symbol, append it and slide the
context, and repeat until END is drawn. The word's entropy is the sum of
``-log2(p)`` over its draws, accumulated left to right in draw order.

Phrase walk:
------------
Generate whole words, joined by single spaces, until the running entropy
reaches ``min_entropy``. At least one word is always produced and the
reported entropy is the true total, so it may overshoot the threshold by
up to one word's worth. A failure part-way through discards the phrase.

Usage:
    model = ChainModel.from_text(text, ngram_length=3, min_word_length=5)
    generator = PassphraseGenerator(model)
    phrase, entropy = generator.generate(min_entropy=60)
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from markovpass.config import GenerationConfig, validate_count, validate_min_entropy
from markovpass.corpus import tokenize
from markovpass.errors import EmptyCorpusError, NoEntropyError
from markovpass.markov import ChainModel, Marker, MarkovTrainer, advance
from markovpass.sampler import Draw, Sampler

logger = logging.getLogger(__name__)


# =============================================================================
# Results
# =============================================================================

@dataclass(frozen=True)
class GeneratedWord:
    """A single completed word walk."""
    word: str
    entropy: float
    draws: Tuple[Draw, ...] = field(repr=False, default=())


@dataclass(frozen=True)
class Passphrase:
    """A finished passphrase; unpacks as ``(phrase, entropy)``."""
    phrase: str
    entropy: float
    words: Tuple[GeneratedWord, ...] = field(repr=False, default=())

    @property
    def draws(self) -> Tuple[Draw, ...]:
        """Every draw made while producing the phrase, in order."""
        return tuple(d for w in self.words for d in w.draws)

    def __iter__(self):
        return iter((self.phrase, self.entropy))

    def __str__(self) -> str:
        return self.phrase


# =============================================================================
# Generator
# =============================================================================

class PassphraseGenerator:
    """Generates passphrases from a shared, read-only ChainModel."""

    def __init__(self, model: ChainModel, rng=None):
        """
        Args:
            model: Trained chain; never modified
            rng: Object with ``randrange``; defaults to secrets.SystemRandom.
                Give each thread its own when generating in parallel.
        """
        self.model = model
        self.sampler = Sampler(model, rng=rng)

    def generate_word(self) -> GeneratedWord:
        """
        Walk the chain from the start context until END is drawn.

        Raises:
            EmptyCorpusError: if the model has no transitions
            ModelTooSparseError: if the walk reaches an unseen context
        """
        if self.model.is_empty:
            raise EmptyCorpusError()

        context = self.model.start_context
        letters: List[str] = []
        draws: List[Draw] = []
        entropy = 0.0

        while True:
            draw = self.sampler.draw(context)
            draws.append(draw)
            entropy += draw.bits
            if draw.symbol is Marker.END:
                break
            letters.append(draw.symbol)
            context = advance(context, draw.symbol)

        return GeneratedWord(word=''.join(letters), entropy=entropy,
                             draws=tuple(draws))

    def generate(self, min_entropy: float = 60.0) -> Passphrase:
        """
        Generate one passphrase with at least ``min_entropy`` bits.

        Raises:
            InvalidParameterError: if min_entropy is negative or not finite
            EmptyCorpusError: if the model has no transitions
            NoEntropyError: if min_entropy > 0 but no draw can ever add entropy
            ModelTooSparseError: if the walk reaches an unseen context
        """
        min_entropy = validate_min_entropy(min_entropy)
        if self.model.is_empty:
            raise EmptyCorpusError()
        if min_entropy > 0 and not self.model.has_entropy:
            raise NoEntropyError()

        words: List[GeneratedWord] = []
        total = 0.0
        while True:
            word = self.generate_word()
            words.append(word)
            total += word.entropy
            if total >= min_entropy:
                break

        phrase = ' '.join(w.word for w in words)
        logger.debug(f"Generated {len(words)} words, {total:.2f} bits "
                     f"(threshold {min_entropy})")
        return Passphrase(phrase=phrase, entropy=total, words=tuple(words))

    def generate_batch(self, count: int, min_entropy: float = 60.0) -> List[Passphrase]:
        """Generate ``count`` independent passphrases."""
        validate_count(count)
        return [self.generate(min_entropy) for _ in range(count)]


# =============================================================================
# Pipeline
# =============================================================================

def gen_passphrases(text: str,
                    config: Optional[GenerationConfig] = None,
                    rng=None) -> List[Passphrase]:
    """
    Tokenize ``text``, train a chain on it and generate passphrases.

    Args:
        text: Raw corpus text
        config: Generation parameters (defaults from configs/app.yaml)
        rng: Optional random source shared by every passphrase

    Returns:
        ``config.count`` passphrases
    """
    config = (config or GenerationConfig()).validate()

    words = tokenize(text, config.min_word_length)
    if not words:
        raise EmptyCorpusError()

    model = MarkovTrainer(config.ngram_length).train(words)
    generator = PassphraseGenerator(model, rng=rng)
    return generator.generate_batch(config.count, config.min_entropy)


__all__ = [
    "GeneratedWord",
    "Passphrase",
    "PassphraseGenerator",
    "gen_passphrases",
]
