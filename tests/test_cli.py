"""
pytest suite for the word ladder CLI.

Runs ``main`` in-process against temporary word lists; exit codes are
checked through ``SystemExit``.
"""

import json
import os

import pytest

from word_ladder import cli
from word_ladder.models import LadderConfig


# =========================================================================
# Fixtures
# =========================================================================


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    """Keep ``main`` from reconfiguring the root logger under pytest."""
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


@pytest.fixture()
def words_file(tmp_path, sample_words):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(sample_words) + "\n", encoding="utf-8")
    return str(path)


def _run(argv):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)
    return exc_info.value.code


# =========================================================================
# Test: Ladder output
# =========================================================================


class TestMain:
    """End-to-end runs of the CLI entry-point."""

    def test_ladder_found(self, words_file, capsys):
        assert _run([words_file, "DOG", "COG"]) == cli.EXIT_FOUND
        assert capsys.readouterr().out == "DOG -> COG\n"

    def test_ladder_not_found(self, words_file, capsys):
        assert _run([words_file, "DOG", "QUX"]) == cli.EXIT_NOT_FOUND
        assert capsys.readouterr().out == "No ladder found.\n"

    def test_upper_flag(self, words_file, capsys):
        assert _run([words_file, "dog", "cat", "--upper"]) == cli.EXIT_FOUND
        assert capsys.readouterr().out == "DOG -> COG -> COT -> CAT\n"

    def test_bucket_index(self, words_file, capsys):
        assert _run([words_file, "DOG", "CAT", "--index", "bucket"]) == cli.EXIT_FOUND
        assert capsys.readouterr().out == "DOG -> COG -> COT -> CAT\n"

    def test_stats(self, words_file, capsys):
        assert _run([words_file, "DOG", "COG", "--stats"]) == cli.EXIT_FOUND
        out = capsys.readouterr().out
        assert "components=2" in out
        assert "isolated=1" in out

    def test_missing_dictionary(self, tmp_path):
        missing = str(tmp_path / "missing.txt")
        assert _run([missing, "DOG", "COG"]) == cli.EXIT_BAD_INPUT

    def test_missing_arguments(self):
        assert _run(["words.txt"]) == 2

    def test_log_level_rejects_unknown_value(self, words_file):
        assert _run([words_file, "DOG", "COG", "--log-level", "DEBG"]) == 2

    def test_log_level_case_insensitive(self, words_file, capsys):
        assert _run([words_file, "DOG", "COG", "--log-level", "debug"]) == cli.EXIT_FOUND
        assert capsys.readouterr().out == "DOG -> COG\n"


# =========================================================================
# Test: Summary and config files
# =========================================================================


class TestFiles:
    """Tests for ``--summary``, ``--save-config`` and ``--apply-config``."""

    def test_summary_written(self, words_file, tmp_path):
        summary_path = str(tmp_path / "out" / "summary.json")
        _run([words_file, "DOG", "CAT", "--summary", summary_path, "--stats"])

        assert os.path.isfile(summary_path)
        with open(summary_path, encoding="utf-8") as fh:
            summary = json.load(fh)
        assert summary["dictionary_size"] == 13
        assert summary["result"]["found"] is True
        assert summary["result"]["steps"] == 3
        assert summary["metrics"]["total_edges"] == 17

    def test_save_then_apply_config(self, words_file, tmp_path, capsys):
        config_path = str(tmp_path / "config.json")
        cli.main(["--save-config", config_path, "--upper", "--index", "bucket"])

        config = cli.load_config(config_path)
        assert config == LadderConfig(upper=True, same_length=False, index="bucket")

        assert _run([words_file, "dog", "cog", "--apply-config", config_path]) == cli.EXIT_FOUND
        assert capsys.readouterr().out == "DOG -> COG\n"

    def test_invalid_config(self, words_file, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"index": "trie"}), encoding="utf-8")
        assert _run([words_file, "DOG", "COG", "--apply-config", str(config_path)]) == cli.EXIT_BAD_INPUT


# =========================================================================
# Test: run()
# =========================================================================


class TestRun:
    """Tests for the ``run`` pipeline function."""

    def test_same_length_filter(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("DOG\nCOG\nDOGS\nCOGS\n", encoding="utf-8")
        summary = cli.run(str(path), "DOG", "COG", LadderConfig(same_length=True))
        assert summary.dictionary_size == 2
        assert summary.result.path == ["DOG", "COG"]
        assert summary.metrics is None

    def test_metrics_exclude_unknown_origin(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("DOG\nCOG\n", encoding="utf-8")
        summary = cli.run(str(path), "ZZZ", "COG", LadderConfig(), with_metrics=True)
        assert summary.dictionary_size == 2
        assert summary.metrics.total_words == summary.dictionary_size
        assert summary.metrics.components == 1
        assert summary.metrics.isolated_words == 0
        assert summary.result.found is False

    def test_format_ladder(self):
        assert cli.format_ladder(["A", "B"]) == "A -> B"
        assert cli.format_ladder(None) == "No ladder found."
