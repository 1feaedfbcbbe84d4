"""
Tests for Corpus Handling
=========================
Tests for tokenization and corpus reading in markovpass/corpus.py.
"""

import io
import string

import pytest

from markovpass.corpus import corpus_dirs, default_corpus_files, read_corpus, tokenize
from markovpass.errors import CorpusReadError, InvalidParameterError


class TestTokenize:
    """Tests for tokenize()."""

    def test_drops_short_words(self):
        """Words shorter than the minimum are discarded."""
        words = tokenize("the cat sat on the mat", 3)
        assert words == ["the", "cat", "sat", "the", "mat"]

    def test_lowercases(self):
        """Letters are lower-cased."""
        assert tokenize("Hello WORLD", 1) == ["hello", "world"]

    def test_splits_on_every_non_letter(self):
        """Digits and punctuation split runs; each run stands alone."""
        assert tokenize("some awes0me test", 3) == ["some", "awes", "test"]
        assert tokenize("123test@314", 3) == ["test"]
        assert tokenize("don't", 1) == ["don", "t"]

    def test_sandwiched_words_extracted(self):
        """A run between punctuation is extracted like any other."""
        assert tokenize("--hello--", 3) == ["hello"]
        assert tokenize("(world)", 3) == ["world"]

    def test_non_ascii_letters_are_separators(self):
        """Accented letters split words, only ASCII letters survive."""
        assert tokenize("café naïve", 2) == ["caf", "na", "ve"]

    def test_empty_input(self):
        """Empty text yields no words."""
        assert tokenize("", 1) == []

    def test_no_qualifying_words(self):
        """Nothing long enough yields an empty list, not an error."""
        assert tokenize("this is a test", 5) == []

    def test_idempotent(self, corpus_text):
        """Tokenizing joined output reproduces the same words."""
        words = tokenize(corpus_text, 4)
        assert tokenize(" ".join(words), 4) == words

    def test_alphabet_invariant(self, corpus_text):
        """Every word is lower-case ASCII and long enough."""
        for min_len in (1, 3, 5, 8):
            for word in tokenize(corpus_text, min_len):
                assert len(word) >= min_len
                assert all(c in string.ascii_lowercase for c in word)

    @pytest.mark.parametrize("value", [0, -1, 2.5, None])
    def test_invalid_min_word_length(self, value):
        """Out-of-domain minimum lengths are rejected."""
        with pytest.raises(InvalidParameterError):
            tokenize("some text", value)


class TestReadCorpus:
    """Tests for read_corpus()."""

    def test_reads_single_file(self, tmp_path):
        path = tmp_path / "corpus.txt"
        path.write_text("alpha beta")
        assert read_corpus([str(path)]) == "alpha beta"

    def test_concatenates_files_in_order(self, tmp_path):
        """Multiple files are joined so words never fuse across files."""
        first = tmp_path / "a.txt"
        second = tmp_path / "b.txt"
        first.write_text("alpha")
        second.write_text("beta")
        text = read_corpus([str(first), str(second)])
        assert tokenize(text, 1) == ["alpha", "beta"]

    def test_no_paths_reads_stdin(self):
        assert read_corpus([], stdin=io.StringIO("from stdin")) == "from stdin"

    def test_dash_reads_stdin(self, tmp_path):
        path = tmp_path / "corpus.txt"
        path.write_text("file")
        text = read_corpus([str(path), "-"], stdin=io.StringIO("stream"))
        assert tokenize(text, 1) == ["file", "stream"]

    def test_missing_file(self, tmp_path):
        """Unreadable files raise CorpusReadError with the path."""
        missing = tmp_path / "missing.txt"
        with pytest.raises(CorpusReadError) as exc_info:
            read_corpus([str(missing)])
        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value, OSError)


class TerminalInput(io.StringIO):
    """Standard input attached to an interactive terminal."""

    def isatty(self):
        return True


class TestInstalledCorpus:
    """With no paths on a terminal, installed *.txt corpora are read."""

    @pytest.fixture
    def data_dirs(self, tmp_path, monkeypatch):
        user_dir = tmp_path / "user" / "markovpass"
        site_dir = tmp_path / "site" / "markovpass"
        user_dir.mkdir(parents=True)
        site_dir.mkdir(parents=True)
        monkeypatch.setattr("markovpass.corpus.corpus_dirs", lambda: [user_dir, site_dir])
        return user_dir, site_dir

    def test_reads_installed_files(self, data_dirs):
        user_dir, site_dir = data_dirs
        (user_dir / "austen.txt").write_text("pride prejudice")
        (site_dir / "lovecraft.txt").write_text("cthulhu")
        (site_dir / "notes.md").write_text("ignored")

        text = read_corpus([], stdin=TerminalInput("never read"))
        assert tokenize(text, 1) == ["pride", "prejudice", "cthulhu"]

    def test_files_sorted_within_directory(self, data_dirs):
        user_dir, _ = data_dirs
        (user_dir / "b.txt").write_text("second")
        (user_dir / "a.txt").write_text("first")
        assert default_corpus_files() == [user_dir / "a.txt", user_dir / "b.txt"]

    def test_missing_directories_skipped(self, tmp_path, monkeypatch):
        present = tmp_path / "present"
        present.mkdir()
        (present / "c.txt").write_text("corpus")
        monkeypatch.setattr("markovpass.corpus.corpus_dirs",
                            lambda: [tmp_path / "absent", present])
        assert default_corpus_files() == [present / "c.txt"]

    def test_no_installed_corpus(self, data_dirs):
        """An interactive run without any corpus fails instead of blocking."""
        user_dir, site_dir = data_dirs
        with pytest.raises(CorpusReadError) as exc_info:
            read_corpus([], stdin=TerminalInput(""))
        assert str(user_dir) in exc_info.value.path
        assert str(site_dir) in exc_info.value.path

    def test_piped_stdin_preferred(self, data_dirs):
        user_dir, _ = data_dirs
        (user_dir / "austen.txt").write_text("installed")
        assert read_corpus([], stdin=io.StringIO("piped")) == "piped"

    def test_dash_reads_terminal(self, data_dirs):
        user_dir, _ = data_dirs
        (user_dir / "austen.txt").write_text("installed")
        assert read_corpus(["-"], stdin=TerminalInput("typed")) == "typed"

    def test_corpus_dirs_user_first(self):
        dirs = corpus_dirs()
        assert len(dirs) >= 2
        assert all(d.name == "markovpass" for d in dirs)
