"""Per-class language model building and relative-frequency smoothing."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .errors import DegenerateModelError
from .models import Document, LanguageModel, SmoothedModel
from .tokenizers import Tokenizer


def combine_counts(language_model: dict[int, int], doc_counts: Mapping[int, int]) -> None:
    """Add one document's term counts into an aggregate count map in place.

    Zero counts are skipped so the aggregate only holds positive values.
    """
    for term_id, count in doc_counts.items():
        if count:
            language_model[term_id] = language_model.get(term_id, 0) + count


def build_language_model(
    label: str,
    documents: Iterable[Document],
    tokenizer: Tokenizer,
) -> LanguageModel:
    """Tokenize a class's documents and merge their counts.

    Each document is merged as soon as it is tokenized, so only the
    aggregate map grows with corpus size.
    """
    model = LanguageModel(label)
    for document in documents:
        combine_counts(model.counts, tokenizer.tokenize(document))
        model.document_count += 1
    return model


def build_language_models(
    documents_by_class: Mapping[str, Iterable[Document]],
    tokenizer: Tokenizer,
) -> dict[str, LanguageModel]:
    """Build one language model per class label."""
    return {
        label: build_language_model(label, documents, tokenizer)
        for label, documents in documents_by_class.items()
    }


def smooth(language_model: LanguageModel) -> SmoothedModel:
    """Convert aggregate counts into relative frequencies.

    ``p(t) = count(t) / total`` where ``total`` is the class's token count.

    Raises:
        DegenerateModelError: If the class has no tokens.
    """
    total = language_model.total
    if total <= 0:
        raise DegenerateModelError(language_model.label)
    return SmoothedModel(
        label=language_model.label,
        probabilities={
            term_id: count / total for term_id, count in language_model.counts.items()
        },
        total=total,
    )
