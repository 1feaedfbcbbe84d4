#!/usr/bin/env python3
"""
Corpus Handling
===============
Turns raw text into the word list a chain is trained on, and reads that
text from files, standard input or the installed corpus directories.

Cleaning rules:
- Every character that is not an ASCII letter is a separator.
- Each maximal run of letters is lower-cased into a candidate word.
- Candidates shorter than the minimum word length are dropped.

    >>> tokenize("The cat sat on the mat", min_word_length=3)
    ['the', 'cat', 'sat', 'the', 'mat']
"""

import os
import re
import sys
import logging
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from platformdirs import PlatformDirs

from markovpass.config import validate_min_word_length
from markovpass.errors import CorpusReadError
from markovpass.settings import APP_NAME, get_setting

logger = logging.getLogger(__name__)

STDIN_PATH = "-"

_WORD_RE = re.compile(r"[A-Za-z]+")


# =============================================================================
# Tokenizer
# =============================================================================

def tokenize(text: str, min_word_length: int) -> List[str]:
    """
    Extract lower-case letter words from raw corpus text.

    Args:
        text: Raw corpus text
        min_word_length: Words shorter than this are discarded

    Returns:
        Words in corpus order; empty if nothing qualifies
    """
    validate_min_word_length(min_word_length)
    return [
        run.lower()
        for run in _WORD_RE.findall(text)
        if len(run) >= min_word_length
    ]


# =============================================================================
# Corpus Sources
# =============================================================================

def corpus_dirs() -> List[Path]:
    """
    Directories searched for an installed corpus, user directory first.

    On Linux these are $XDG_DATA_HOME/markovpass followed by each
    $XDG_DATA_DIRS entry (e.g. /usr/share/markovpass).
    """
    dirs = PlatformDirs(APP_NAME, multipath=True)
    paths = [Path(dirs.user_data_dir)]
    paths.extend(Path(p) for p in dirs.site_data_dir.split(os.pathsep) if p)
    return paths


def default_corpus_files() -> List[Path]:
    """All ``*.txt`` files found in the corpus directories."""
    files = []
    for directory in corpus_dirs():
        if directory.is_dir():
            files.extend(sorted(directory.glob("*.txt")))
    return files


def _read_path(path: str, encoding: str) -> str:
    try:
        return Path(path).read_text(encoding=encoding, errors="ignore")
    except OSError as e:
        raise CorpusReadError(path, e) from e


def read_corpus(paths: Optional[Iterable[str]] = None,
                stdin: Optional[TextIO] = None) -> str:
    """
    Read corpus text from files, concatenated in order.

    The path "-" reads standard input. With no paths, standard input is
    read when it is a pipe or file; on an interactive terminal the
    installed corpus files are read instead.

    Raises:
        CorpusReadError: if a source cannot be read, or no installed
            corpus exists when one is needed
    """
    paths = list(paths or [])
    stdin = stdin or sys.stdin
    encoding = get_setting("corpus.encoding", "utf-8")

    if not paths:
        if stdin.isatty():
            paths = [str(p) for p in default_corpus_files()]
            if not paths:
                searched = os.pathsep.join(str(d) for d in corpus_dirs())
                raise CorpusReadError(
                    searched, FileNotFoundError("no *.txt corpus installed"))
            logger.debug(f"Using installed corpus: {', '.join(paths)}")
        else:
            paths = [STDIN_PATH]

    chunks = []
    for path in paths:
        if path == STDIN_PATH:
            logger.debug("Reading corpus from stdin")
            try:
                chunks.append(stdin.read())
            except OSError as e:
                raise CorpusReadError(STDIN_PATH, e) from e
        else:
            logger.debug(f"Reading corpus from {path}")
            chunks.append(_read_path(path, encoding))

    # Newline keeps the last word of one source apart from the next
    return "\n".join(chunks)


__all__ = [
    "tokenize",
    "read_corpus",
    "corpus_dirs",
    "default_corpus_files",
    "STDIN_PATH",
]
