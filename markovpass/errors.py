#!/usr/bin/env python3
"""
Error Types
===========
Every failure the passphrase pipeline can report, as distinct exception
classes so callers (the CLI in particular) can pick their own messages.
"""


class MarkovpassError(Exception):
    """Base class for all markovpass errors."""


class EmptyCorpusError(MarkovpassError):
    """The corpus produced no words, so the chain has no transitions."""

    def __init__(self, message: str = "No words found in cleaned input."):
        super().__init__(message)


class ModelTooSparseError(MarkovpassError):
    """A generation walk reached a context with no recorded transitions."""

    def __init__(self, context: tuple):
        self.context = context
        super().__init__(
            f"No transitions recorded for context {context!r}; "
            "try a shorter ngram length or a larger corpus."
        )


class NoEntropyError(MarkovpassError):
    """Every context has a single successor, so no walk gains entropy."""

    def __init__(self, message: str = "Cleaned input has no entropy."):
        super().__init__(message)


class InvalidParameterError(MarkovpassError, ValueError):
    """A configuration value is outside its valid domain."""

    def __init__(self, name: str, value, reason: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}={value!r}: {reason}")


class CorpusReadError(MarkovpassError, OSError):
    """A corpus source could not be read."""

    def __init__(self, path, cause: Exception = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"{path}: Failed to read input{detail}")


__all__ = [
    "MarkovpassError",
    "EmptyCorpusError",
    "ModelTooSparseError",
    "NoEntropyError",
    "InvalidParameterError",
    "CorpusReadError",
]
