"""Pipeline orchestrating corpus loading, counting, smoothing, and ranking.

The ``FeaturePipeline`` class is the primary entry point. It runs the
phases strictly in order (every class is counted before any is smoothed,
and both compared classes are smoothed before ranking) and reports
progress to a diagnostic console.
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console

from .config import FeatureConfig
from .corpus import load_corpus
from .language_model import build_language_models, smooth
from .models import Document, FeatureRanking, LanguageModel, SmoothedModel
from .ranker import EPSILON, rank_features
from .tokenizers import Tokenizer, create_tokenizer, load_function_words


def tokenizer_from_config(config: FeatureConfig) -> Tokenizer:
    """Create the tokenizer a configuration selects."""
    function_words = (
        load_function_words(config.function_words) if config.function_words else None
    )
    return create_tokenizer(
        config.method,
        config.option,
        n=config.ngram_size,
        function_words=function_words,
    )


class FeaturePipeline:
    """Rank terms by how well they separate two classes of a corpus.

    Example::

        config = load_config("features.yaml")
        ranking = FeaturePipeline(config).run()

        for line in ranking.to_lines():
            print(line)

    Args:
        config: Validated run configuration.
        tokenizer: Custom tokenizer; by default the one ``config`` selects.
        console: Diagnostic console; by default ``stderr``.
    """

    def __init__(
        self,
        config: FeatureConfig,
        tokenizer: Tokenizer | None = None,
        console: Console | None = None,
    ) -> None:
        self.config = config
        self.tokenizer = tokenizer or tokenizer_from_config(config)
        self._console = console or Console(stderr=True)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, top: int | None = None, epsilon: float = EPSILON) -> FeatureRanking:
        """Run every phase and return the ranking for the configured pair.

        Raises:
            CorpusAccessError: If the corpus or a document cannot be read.
            DegenerateModelError: If the numerator or denominator class,
                including one missing from the corpus, has no tokens.
        """
        documents = self.load_documents()
        models = self.build_models(documents)
        pair = (self.config.numerator, self.config.denominator)
        for label in pair:
            models.setdefault(label, LanguageModel(label))
        smoothed = self.smooth_models(models, labels=pair)
        return self.compare(smoothed, top=top, epsilon=epsilon)

    def load_documents(self) -> dict[str, list[Document]]:
        return load_corpus(self.config.corpus_path)

    def build_models(self, documents: dict[str, list[Document]]) -> dict[str, LanguageModel]:
        self._report("Tokenizing...")
        return build_language_models(documents, self.tokenizer)

    def smooth_models(
        self,
        models: dict[str, LanguageModel],
        labels: Iterable[str] | None = None,
    ) -> dict[str, SmoothedModel]:
        """Report every class's token total, then smooth the given classes.

        Classes outside ``labels`` are reported but never smoothed, so an
        empty class that is not being compared does not fail the run.
        """
        self._report("Smoothing...")
        for model in models.values():
            self._report(f" {model.total} total tokens in class {model.label}")
        selected = list(models) if labels is None else list(labels)
        return {label: smooth(models[label]) for label in selected}

    def compare(
        self,
        smoothed: dict[str, SmoothedModel],
        top: int | None = None,
        epsilon: float = EPSILON,
    ) -> FeatureRanking:
        """Rank features for the configured numerator/denominator pair."""
        numerator = smoothed[self.config.numerator]
        denominator = smoothed[self.config.denominator]
        self._report("Comparing features between classes...")
        self._report(f"calculating p(f|{numerator.label})/p(f|{denominator.label})...")
        return rank_features(
            numerator,
            denominator,
            self.tokenizer.label_of,
            epsilon=epsilon,
            top=top,
        )

    def class_summary(self) -> list[LanguageModel]:
        """Count every class without smoothing or ranking."""
        return list(self.build_models(self.load_documents()).values())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _report(self, message: str) -> None:
        self._console.print(message, markup=False, highlight=False)
