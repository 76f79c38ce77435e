"""Data models for per-class language models and feature rankings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .errors import CorpusAccessError


class TokenizerMethod(str, Enum):
    """Top-level tokenization strategies."""

    NGRAM = "ngram"
    TREE = "tree"


class NgramType(str, Enum):
    """Units an n-gram tokenizer is built from."""

    POS = "POS"
    WORD = "Word"
    FUNCTION_WORD = "FW"
    CHAR = "Char"


class TreeFeatureType(str, Enum):
    """Features a tree tokenizer extracts from parse trees."""

    SUBTREE = "Subtree"
    DEPTH = "Depth"
    BRANCH = "Branch"
    TAG = "Tag"
    SKELETON = "Skel"
    SEMI_SKELETON = "Semi"


@dataclass
class Document:
    """A single corpus document and its term counts.

    ``frequencies`` is empty until a tokenizer has processed the document.
    """

    path: Path
    class_label: str
    frequencies: dict[int, int] = field(default_factory=dict, repr=False)

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def token_count(self) -> int:
        return sum(self.frequencies.values())

    def sidecar(self, suffix: str) -> Path:
        """Path of a companion file such as ``<document>.pos``."""
        return self.path.with_name(self.path.name + suffix)

    def read_text(self, suffix: str = "") -> str:
        """Read the document (or one of its sidecars) as UTF-8 text.

        Raises:
            CorpusAccessError: If the file is missing or unreadable.
        """
        path = self.sidecar(suffix) if suffix else self.path
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise CorpusAccessError(f"Cannot read document {path}: {exc}") from exc


@dataclass
class LanguageModel:
    """Aggregate term counts for one class."""

    label: str
    counts: dict[int, int] = field(default_factory=dict)
    document_count: int = 0

    @property
    def total(self) -> int:
        """Total number of tokens across all documents of the class."""
        return sum(self.counts.values())

    @property
    def vocabulary_size(self) -> int:
        return len(self.counts)


@dataclass(frozen=True)
class SmoothedModel:
    """Relative-frequency probability distribution over a class's terms."""

    label: str
    probabilities: Mapping[int, float]
    total: int

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "probabilities", MappingProxyType(dict(self.probabilities))
        )

    def probability(self, term_id: int) -> float:
        """Probability of a term, 0.0 if the class never produced it."""
        return self.probabilities.get(term_id, 0.0)

    def __contains__(self, term_id: object) -> bool:
        return term_id in self.probabilities


@dataclass(frozen=True)
class FeatureScore:
    """Discriminativeness ratio of one term between two classes."""

    term_id: int
    ratio: float
    label: str

    @property
    def favors_numerator(self) -> bool:
        return self.ratio > 1.0

    def to_line(self) -> str:
        return f"{self.ratio:g} {self.label}"

    def to_dict(self) -> dict:
        return {
            "term_id": self.term_id,
            "ratio": self.ratio,
            "label": self.label,
        }


@dataclass
class FeatureRanking:
    """Ordered feature scores for one numerator/denominator class pair."""

    numerator: str
    denominator: str
    features: list[FeatureScore] = field(default_factory=list)

    @property
    def header(self) -> str:
        return f"#### p(f|{self.numerator})/p(f|{self.denominator})"

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self):
        return iter(self.features)

    def to_lines(self) -> list[str]:
        return [self.header] + [feature.to_line() for feature in self.features]

    def to_dict(self) -> dict:
        return {
            "numerator": self.numerator,
            "denominator": self.denominator,
            "features": [f.to_dict() for f in self.features],
        }
