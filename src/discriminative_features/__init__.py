"""Discriminative Features -- rank terms that separate two corpus classes."""

__version__ = "0.1.0"

from .config import FeatureConfig, load_config
from .corpus import load_corpus
from .errors import (
    ConfigurationError,
    CorpusAccessError,
    DegenerateModelError,
    FeatureRankingError,
    TreeParseError,
    UnknownMethodError,
    UnknownTermError,
)
from .language_model import build_language_model, build_language_models, combine_counts, smooth
from .models import (
    Document,
    FeatureRanking,
    FeatureScore,
    LanguageModel,
    NgramType,
    SmoothedModel,
    TokenizerMethod,
    TreeFeatureType,
)
from .pipeline import FeaturePipeline
from .ranker import EPSILON, feature_ratio, rank_features
from .tokenizers import Tokenizer, create_tokenizer
from .trees import ParseTree
from .vocabulary import TermVocabulary

__all__ = [
    # Core
    "FeaturePipeline",
    "build_language_model",
    "build_language_models",
    "combine_counts",
    "smooth",
    "rank_features",
    "feature_ratio",
    "EPSILON",
    # Models
    "Document",
    "LanguageModel",
    "SmoothedModel",
    "FeatureScore",
    "FeatureRanking",
    "TokenizerMethod",
    "NgramType",
    "TreeFeatureType",
    # Collaborators
    "FeatureConfig",
    "load_config",
    "load_corpus",
    "Tokenizer",
    "create_tokenizer",
    "TermVocabulary",
    "ParseTree",
    # Errors
    "FeatureRankingError",
    "ConfigurationError",
    "UnknownMethodError",
    "DegenerateModelError",
    "CorpusAccessError",
    "TreeParseError",
    "UnknownTermError",
]
