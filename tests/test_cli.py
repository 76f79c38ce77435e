"""Tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from discriminative_features.cli import main


def _invoke(*args: str):
    return CliRunner().invoke(main, list(args))


class TestRankCommand:
    def test_text_output(self, config_file: Path) -> None:
        result = _invoke("rank", str(config_file))
        assert result.exit_code == 0, result.output
        assert "#### p(f|chinese)/p(f|english)" in result.output
        assert "4001 cat" in result.output
        assert "0.00019996 dog" in result.output

    def test_pair_override(self, config_file: Path) -> None:
        result = _invoke("rank", "-n", "english", "-d", "korean", str(config_file))
        assert result.exit_code == 0, result.output
        assert "#### p(f|english)/p(f|korean)" in result.output

    def test_top(self, config_file: Path) -> None:
        result = _invoke("rank", "--top", "1", str(config_file))
        assert result.exit_code == 0
        assert "cat" in result.output
        assert " dog" not in result.output

    def test_save_json(self, config_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "ranking.json"
        result = _invoke("rank", "--save", str(out), str(config_file))
        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["numerator"] == "chinese"
        assert [f["label"] for f in data["features"]] == ["cat", "the", "sat", "dog"]

    def test_save_to_missing_directory_exits_nonzero(
        self, config_file: Path, tmp_path: Path,
    ) -> None:
        out = tmp_path / "missing" / "ranking.json"
        result = _invoke("rank", "--save", str(out), str(config_file))
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)

    def test_empty_class_outside_pair(self, make_corpus, make_config) -> None:
        make_corpus({
            "chinese/a.txt": "cat cat",
            "english/a.txt": "dog",
            "korean/a.txt": "",
        })
        path = make_config(prefix="custom", method="ngram", ngramOpt="Word", ngram=1)
        result = _invoke("rank", str(path))
        assert result.exit_code == 0, result.output
        assert "cat" in result.output

    def test_unknown_method_exits_nonzero(self, make_config, corpus_dir: Path) -> None:
        path = make_config(prefix="corpus", method="bayes")
        result = _invoke("rank", str(path))
        assert result.exit_code == 1

    def test_missing_key_exits_nonzero(self, make_config) -> None:
        path = make_config(method="ngram", ngramOpt="Word", ngram=1)
        result = _invoke("rank", str(path))
        assert result.exit_code == 1

    def test_missing_class_exits_nonzero(self, config_file: Path) -> None:
        result = _invoke("rank", "--numerator", "french", str(config_file))
        assert result.exit_code == 1
        assert "####" not in result.output

    def test_missing_corpus_exits_nonzero(self, make_config) -> None:
        path = make_config(prefix="absent", method="ngram", ngramOpt="Word", ngram=1)
        result = _invoke("rank", str(path))
        assert result.exit_code == 1

    def test_config_file_must_exist(self, tmp_path: Path) -> None:
        result = _invoke("rank", str(tmp_path / "none.yaml"))
        assert result.exit_code != 0


class TestClassesCommand:
    def test_table(self, config_file: Path) -> None:
        result = _invoke("classes", str(config_file))
        assert result.exit_code == 0, result.output
        for label in ("chinese", "english", "korean"):
            assert label in result.output

    def test_bad_config(self, make_config) -> None:
        result = _invoke("classes", str(make_config(prefix="p", method="tree")))
        assert result.exit_code == 1


def test_version() -> None:
    result = _invoke("--version")
    assert result.exit_code == 0
    assert "version" in result.output
