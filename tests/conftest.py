"""Shared test fixtures for discriminative-features tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from discriminative_features.config import FeatureConfig, load_config

# chinese: the x2, cat x2, sat x1 (5 tokens)
# english: the x1, dog x2, sat x1 (4 tokens)
# korean: cat x1
SAMPLE_CORPUS = {
    "chinese/a.txt": "The the cat",
    "chinese/b.txt": "cat sat",
    "english/a.txt": "the dog",
    "english/b.txt": "Dog sat.",
    "korean/a.txt": "cat",
}


def write_corpus(root: Path, documents: dict[str, str]) -> Path:
    """Write documents and a ``full-corpus.txt`` index under ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for rel_path, text in documents.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    (root / "full-corpus.txt").write_text("\n".join(documents) + "\n", encoding="utf-8")
    return root


def write_config(path: Path, **values: object) -> Path:
    lines = [f"{key}: {value}" for key, value in values.items()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """A small three-class corpus on disk."""
    return write_corpus(tmp_path / "corpus", SAMPLE_CORPUS)


@pytest.fixture
def config_file(tmp_path: Path, corpus_dir: Path) -> Path:
    """Word unigram configuration comparing chinese against english."""
    return write_config(
        tmp_path / "features.yaml",
        prefix="corpus",
        method="ngram",
        ngramOpt="Word",
        ngram=1,
        numerator="chinese",
        denominator="english",
    )


@pytest.fixture
def config(config_file: Path) -> FeatureConfig:
    return load_config(config_file)


@pytest.fixture
def diagnostics() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(diagnostics: io.StringIO) -> Console:
    """A console capturing diagnostic output."""
    return Console(file=diagnostics, width=200)


@pytest.fixture
def make_corpus(tmp_path: Path):
    """Factory writing a custom corpus under ``tmp_path``."""

    def _make(documents: dict[str, str], name: str = "custom") -> Path:
        return write_corpus(tmp_path / name, documents)

    return _make


@pytest.fixture
def make_config(tmp_path: Path):
    """Factory writing a YAML configuration file under ``tmp_path``."""

    def _make(name: str = "custom.yaml", **values: object) -> Path:
        return write_config(tmp_path / name, **values)

    return _make
