"""Tokenizers turning corpus documents into term frequency counts.

A ``Tokenizer`` pairs a term extraction strategy with a ``TermVocabulary``.
Strategies are plain functions from a ``Document`` to a list of term
strings, selected by ``create_tokenizer`` from a table keyed by the
tokenization method and its option:

=========  ===========================================================
method     options
=========  ===========================================================
ngram      ``POS``, ``Word``, ``FW`` (function words), ``Char``
tree       ``Subtree``, ``Depth``, ``Branch``, ``Tag``, ``Skel``, ``Semi``
=========  ===========================================================

Part-of-speech tags and parse trees are read from sidecar files next to
each document (``<document>.pos`` and ``<document>.tree``).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from functools import partial
from pathlib import Path

from . import trees
from .errors import ConfigurationError, UnknownMethodError
from .models import Document, NgramType, TokenizerMethod, TreeFeatureType
from .vocabulary import TermVocabulary

TermExtractor = Callable[[Document], list[str]]

POS_SUFFIX = ".pos"
TREE_SUFFIX = ".tree"

_WORD_RE = re.compile(r"\w+", re.UNICODE)
_WHITESPACE_RE = re.compile(r"\s+")

FUNCTION_WORDS: frozenset[str] = frozenset({
    "a", "about", "above", "after", "again", "against", "all", "am", "an",
    "and", "any", "are", "as", "at", "be", "because", "been", "before",
    "being", "below", "between", "both", "but", "by", "can", "could", "did",
    "do", "does", "doing", "down", "during", "each", "few", "for", "from",
    "further", "had", "has", "have", "having", "he", "her", "here", "hers",
    "herself", "him", "himself", "his", "how", "i", "if", "in", "into", "is",
    "it", "its", "itself", "may", "me", "might", "more", "most", "must", "my",
    "myself", "no", "nor", "not", "of", "off", "on", "once", "only", "or",
    "other", "ought", "our", "ours", "ourselves", "out", "over", "own",
    "same", "shall", "she", "should", "so", "some", "such", "than", "that",
    "the", "their", "theirs", "them", "themselves", "then", "there", "these",
    "they", "this", "those", "through", "to", "too", "under", "until", "up",
    "upon", "very", "was", "we", "were", "what", "when", "where", "which",
    "while", "who", "whom", "why", "will", "with", "would", "you", "your",
    "yours", "yourself", "yourselves",
})


# ---------------------------------------------------------------------------
# Unit extraction
# ---------------------------------------------------------------------------

def _words(text: str) -> list[str]:
    """Extract lowercase word tokens from text."""
    return [m.group().lower() for m in _WORD_RE.finditer(text)]


def _ngrams(tokens: list[str], n: int, sep: str = " ") -> list[str]:
    """Generate n-grams from a token list.

    Word-level units never contain whitespace, so joining them with a space
    keeps distinct n-grams distinct. Character units are joined with no
    separator, which gives the n-character substring.
    """
    if n <= 1:
        return tokens
    return [sep.join(tokens[i : i + n]) for i in range(len(tokens) - n + 1)]


def word_units(document: Document) -> list[str]:
    return _words(document.read_text())


def char_units(document: Document) -> list[str]:
    text = _WHITESPACE_RE.sub(" ", document.read_text()).strip()
    return list(text)


def function_word_units(document: Document, function_words: frozenset[str]) -> list[str]:
    return [w for w in _words(document.read_text()) if w in function_words]


def pos_units(document: Document) -> list[str]:
    """Read part-of-speech tags from the document's ``.pos`` sidecar.

    Tokens written as ``word/TAG`` or ``word_TAG`` keep only the tag.
    """
    tags = []
    for token in document.read_text(POS_SUFFIX).split():
        for sep in ("/", "_"):
            if sep in token.strip(sep):
                token = token.rsplit(sep, 1)[1]
                break
        tags.append(token)
    return tags


def ngram_extractor(units: TermExtractor, n: int, sep: str = " ") -> TermExtractor:
    """Build a strategy producing n-grams over the given units."""

    def extract(document: Document) -> list[str]:
        return _ngrams(units(document), n, sep)

    return extract


def tree_extractor(feature: Callable[[trees.ParseTree], list[str]]) -> TermExtractor:
    """Build a strategy applying a tree feature to every sidecar tree."""

    def extract(document: Document) -> list[str]:
        terms: list[str] = []
        for tree in trees.parse_trees(document.read_text(TREE_SUFFIX)):
            terms.extend(feature(tree))
        return terms

    return extract


_TREE_FEATURES: dict[TreeFeatureType, Callable[[trees.ParseTree], list[str]]] = {
    TreeFeatureType.SUBTREE: trees.subtree_features,
    TreeFeatureType.DEPTH: trees.depth_features,
    TreeFeatureType.BRANCH: trees.branch_features,
    TreeFeatureType.TAG: trees.tag_features,
    TreeFeatureType.SKELETON: trees.skeleton_features,
    TreeFeatureType.SEMI_SKELETON: trees.semi_skeleton_features,
}


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------

class Tokenizer:
    """Term counting over documents with a shared vocabulary.

    Args:
        extractor: Strategy turning a document into term strings.
        vocabulary: Vocabulary issuing term IDs (a new one by default).
        name: Human-readable description of the strategy.
    """

    def __init__(
        self,
        extractor: TermExtractor,
        vocabulary: TermVocabulary | None = None,
        name: str = "custom",
    ) -> None:
        self._extractor = extractor
        self.vocabulary = vocabulary or TermVocabulary()
        self.name = name

    def tokenize(self, document: Document) -> dict[int, int]:
        """Count the document's terms and store them on the document.

        Returns:
            The document's term ID frequency map. Its values sum to the
            number of terms the strategy produced.
        """
        counts = self.vocabulary.count_terms(self._extractor(document))
        document.frequencies = counts
        return counts

    def label_of(self, term_id: int) -> str:
        """Display label for a term ID issued while tokenizing."""
        return self.vocabulary.label_of(term_id)

    def __repr__(self) -> str:
        return f"Tokenizer({self.name!r}, terms={len(self.vocabulary)})"


def load_function_words(path: str | Path) -> frozenset[str]:
    """Read a newline-separated function word list.

    Raises:
        ConfigurationError: If the file cannot be read.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read function word list {path}: {exc}") from exc
    return frozenset(line.strip().lower() for line in text.splitlines() if line.strip())


def _parse_option(enum_cls, value, what: str):
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(e.value for e in enum_cls)
        raise UnknownMethodError(
            f"Unknown {what} '{value}'. Expected one of: {choices}"
        ) from None


def create_tokenizer(
    method: str | TokenizerMethod,
    option: str | NgramType | TreeFeatureType,
    n: int = 1,
    function_words: Iterable[str] | None = None,
) -> Tokenizer:
    """Create a tokenizer from a method tag and its option tag.

    Args:
        method: ``"ngram"`` or ``"tree"``.
        option: N-gram unit (``POS``, ``Word``, ``FW``, ``Char``) or tree
            feature (``Subtree``, ``Depth``, ``Branch``, ``Tag``, ``Skel``,
            ``Semi``).
        n: N-gram size; ignored for tree tokenizers.
        function_words: Word list for ``FW``; defaults to ``FUNCTION_WORDS``.

    Raises:
        UnknownMethodError: If the method or option is not recognized.
        ConfigurationError: If ``n`` is less than 1.
    """
    method = _parse_option(TokenizerMethod, method, "tokenization method")

    if method is TokenizerMethod.TREE:
        feature = _parse_option(TreeFeatureType, option, "tree option")
        return Tokenizer(tree_extractor(_TREE_FEATURES[feature]), name=f"tree:{feature.value}")

    ngram_type = _parse_option(NgramType, option, "n-gram option")
    if n < 1:
        raise ConfigurationError(f"N-gram size must be at least 1, got {n}")

    units: TermExtractor
    if ngram_type is NgramType.FUNCTION_WORD:
        words = FUNCTION_WORDS
        if function_words is not None:
            words = frozenset(w.lower() for w in function_words)
        units = partial(function_word_units, function_words=words)
    elif ngram_type is NgramType.POS:
        units = pos_units
    elif ngram_type is NgramType.CHAR:
        units = char_units
    else:
        units = word_units

    sep = "" if ngram_type is NgramType.CHAR else " "
    return Tokenizer(ngram_extractor(units, n, sep), name=f"ngram:{ngram_type.value}:{n}")
