#!/usr/bin/env python3
"""
Generation Configuration
========================
Parameters consumed by the passphrase pipeline. Any field left as None is
filled from the ``generation`` section of configs/app.yaml.
"""

import math
from dataclasses import dataclass
from typing import Optional

from markovpass.errors import InvalidParameterError
from markovpass.settings import get_setting


@dataclass
class GenerationConfig:
    """Corpus filtering, chain order and output quantity."""
    ngram_length: Optional[int] = None      # Context width of the chain
    min_word_length: Optional[int] = None   # Shorter corpus words are dropped
    min_entropy: Optional[float] = None     # Bits each passphrase must reach
    count: Optional[int] = None             # Passphrases per run

    def __post_init__(self):
        cfg = get_setting("generation", {}) or {}
        if self.ngram_length is None:
            self.ngram_length = cfg.get("ngram_length")
        if self.min_word_length is None:
            self.min_word_length = cfg.get("min_word_length")
        if self.min_entropy is None:
            self.min_entropy = cfg.get("min_entropy")
        if self.count is None:
            self.count = cfg.get("count")

        missing = [
            name for name, value in (
                ("ngram_length", self.ngram_length),
                ("min_word_length", self.min_word_length),
                ("min_entropy", self.min_entropy),
                ("count", self.count),
            )
            if value is None
        ]
        if missing:
            raise ValueError(f"generation settings missing in app.yaml: {', '.join(missing)}")

    def validate(self) -> 'GenerationConfig':
        """Reject out-of-domain values before any model work begins."""
        validate_ngram_length(self.ngram_length)
        validate_min_word_length(self.min_word_length)
        validate_min_entropy(self.min_entropy)
        validate_count(self.count)
        return self


def validate_ngram_length(value) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise InvalidParameterError("ngram_length", value, "must be an integer >= 1")
    return value


def validate_min_word_length(value) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise InvalidParameterError("min_word_length", value, "must be an integer >= 1")
    return value


def validate_min_entropy(value) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError("min_entropy", value, "must be a number") from None
    if not math.isfinite(value) or value < 0:
        raise InvalidParameterError("min_entropy", value, "must be a finite non-negative number")
    return value


def validate_count(value) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise InvalidParameterError("count", value, "must be a non-negative integer")
    return value


__all__ = [
    "GenerationConfig",
    "validate_ngram_length",
    "validate_min_word_length",
    "validate_min_entropy",
    "validate_count",
]
