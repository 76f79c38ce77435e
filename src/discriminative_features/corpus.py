"""Corpus loading: group documents by class label.

A corpus directory holds an index file, ``full-corpus.txt``, listing one
document path per line relative to the corpus directory. The class label
of a document is the first component of that path::

    english/essay-001.txt   ->  class "english"
    chinese/essay-042.txt   ->  class "chinese"
"""

from __future__ import annotations

from pathlib import Path

from .errors import CorpusAccessError
from .models import Document

INDEX_FILENAME = "full-corpus.txt"


def class_of(path: str) -> str:
    """Class label of an index entry: the text before the first ``/``."""
    return path.split("/", 1)[0]


def read_index(root: Path) -> list[str]:
    """Read the corpus index, skipping blank lines.

    Raises:
        CorpusAccessError: If the index file is missing or unreadable.
    """
    index = root / INDEX_FILENAME
    try:
        text = index.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusAccessError(f"Cannot read corpus index {index}: {exc}") from exc
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_corpus(root: str | Path) -> dict[str, list[Document]]:
    """Load the corpus rooted at ``root``.

    Args:
        root: Corpus directory containing ``full-corpus.txt``.

    Returns:
        Documents grouped by class label, classes in first-seen order and
        documents in index order.

    Raises:
        CorpusAccessError: If the index cannot be read.
    """
    root = Path(root)
    if not root.is_dir():
        raise CorpusAccessError(f"Corpus directory not found: {root}")

    documents: dict[str, list[Document]] = {}
    for entry in read_index(root):
        label = class_of(entry)
        documents.setdefault(label, []).append(Document(root / entry, label))
    return documents
