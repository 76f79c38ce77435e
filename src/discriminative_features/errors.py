"""Exception taxonomy for feature ranking runs.

Every error raised by the library derives from ``FeatureRankingError`` so
the command-line layer can report it and exit with a non-zero status.
Each class also inherits the closest built-in exception, so callers that
already catch ``ValueError`` or ``OSError`` keep working.
"""

from __future__ import annotations


class FeatureRankingError(Exception):
    """Base class for all errors raised by ``discriminative_features``."""


class ConfigurationError(FeatureRankingError, ValueError):
    """A required configuration key is missing or cannot be parsed."""


class UnknownMethodError(ConfigurationError):
    """The tokenization method or one of its options is not recognized."""


class DegenerateModelError(FeatureRankingError, ZeroDivisionError):
    """A class has a total token count of zero and cannot be smoothed."""

    def __init__(self, class_label: str) -> None:
        self.class_label = class_label
        super().__init__(
            f"Class '{class_label}' has no tokens; cannot build a smoothed model"
        )


class CorpusAccessError(FeatureRankingError, OSError):
    """The corpus index or one of its documents could not be read."""


class TreeParseError(CorpusAccessError):
    """A parse-tree sidecar file contains malformed bracketing."""


class UnknownTermError(FeatureRankingError, KeyError):
    """A term ID was not issued by the vocabulary it was looked up in."""

    def __init__(self, term_id: int) -> None:
        self.term_id = term_id
        super().__init__(term_id)

    def __str__(self) -> str:
        return f"Term ID {self.term_id} is not in the vocabulary"
