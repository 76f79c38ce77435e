"""Term vocabulary mapping term strings to stable integer IDs."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import UnknownTermError


class TermVocabulary:
    """Bidirectional mapping between term strings and term IDs.

    IDs are assigned densely from 0 in the order terms are first seen, so
    they are stable for the lifetime of one vocabulary instance.

    Example::

        vocab = TermVocabulary()
        vocab.term_id("the cat")   # 0
        vocab.term_id("cat sat")   # 1
        vocab.term_id("the cat")   # 0
        vocab.label_of(1)          # "cat sat"
    """

    def __init__(self) -> None:
        self._ids: dict[str, int] = {}
        self._labels: list[str] = []

    def term_id(self, term: str) -> int:
        """Return the ID for ``term``, assigning a new one if unseen."""
        existing = self._ids.get(term)
        if existing is not None:
            return existing
        new_id = len(self._labels)
        self._ids[term] = new_id
        self._labels.append(term)
        return new_id

    def lookup(self, term: str) -> int | None:
        """Return the ID for ``term`` without assigning one."""
        return self._ids.get(term)

    def count_terms(self, terms: Iterable[str]) -> dict[int, int]:
        """Map a sequence of terms to a term ID frequency map."""
        counts: dict[int, int] = {}
        for term in terms:
            tid = self.term_id(term)
            counts[tid] = counts.get(tid, 0) + 1
        return counts

    def label_of(self, term_id: int) -> str:
        """Return the display label for a term ID.

        Raises:
            UnknownTermError: If the ID was never issued by this vocabulary.
        """
        if not isinstance(term_id, int) or not 0 <= term_id < len(self._labels):
            raise UnknownTermError(term_id)
        return self._labels[term_id]

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, term: object) -> bool:
        return term in self._ids
