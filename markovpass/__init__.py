#!/usr/bin/env python3
"""
markovpass - Markov Chain Passphrase Generator
==============================================

Generates pronounceable passphrases by sampling a character-level Markov
chain trained on a text corpus, and reports the Shannon entropy of the
choices actually made as a lower bound on passphrase strength.

Quick Start
-----------
    from markovpass import ChainModel, PassphraseGenerator

    model = ChainModel.from_text(text, ngram_length=3, min_word_length=5)
    generator = PassphraseGenerator(model)
    phrase, entropy = generator.generate(min_entropy=60)

Modules
-------
    markovpass.corpus    - Corpus reading and tokenization
    markovpass.markov    - Chain model and trainer
    markovpass.sampler   - Weighted draws with exact entropy
    markovpass.generator - Word and passphrase walks
    markovpass.config    - Generation parameters

CLI Usage
---------
    markovpass corpus.txt -n 5 --show-entropy
    cat corpus.txt | python -m markovpass -e 80
"""

__version__ = "2.0.1"

from .errors import (
    MarkovpassError,
    EmptyCorpusError,
    ModelTooSparseError,
    NoEntropyError,
    InvalidParameterError,
    CorpusReadError,
)
from .config import GenerationConfig
from .corpus import tokenize, read_corpus
from .markov import (
    Marker,
    Distribution,
    ChainModel,
    MarkovTrainer,
)
from .sampler import Draw, Sampler
from .generator import (
    GeneratedWord,
    Passphrase,
    PassphraseGenerator,
    gen_passphrases,
)

__all__ = [
    '__version__',

    # Errors
    'MarkovpassError',
    'EmptyCorpusError',
    'ModelTooSparseError',
    'NoEntropyError',
    'InvalidParameterError',
    'CorpusReadError',

    # Config
    'GenerationConfig',

    # Corpus
    'tokenize',
    'read_corpus',

    # Chain
    'Marker',
    'Distribution',
    'ChainModel',
    'MarkovTrainer',

    # Sampling
    'Draw',
    'Sampler',

    # Generation
    'GeneratedWord',
    'Passphrase',
    'PassphraseGenerator',
    'gen_passphrases',
]
