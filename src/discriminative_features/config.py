"""Run configuration loaded from a YAML file.

The file is a flat mapping of keys to scalar values::

    prefix: thesis-corpus
    method: ngram
    ngramOpt: Word
    ngram: 2
    numerator: chinese
    denominator: english

Values are read as strings and validated into a ``FeatureConfig``. See
``FeatureConfig`` for the full list of keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

import yaml

from .errors import ConfigurationError, UnknownMethodError
from .models import NgramType, TokenizerMethod, TreeFeatureType

DEFAULT_NUMERATOR = "chinese"
DEFAULT_DENOMINATOR = "english"


@dataclass
class FeatureConfig:
    """Validated settings for one feature ranking run.

    Attributes:
        corpus_root: Base directory holding corpora (``corpusRoot``).
        prefix: Corpus directory under ``corpus_root`` (``prefix``).
        method: Tokenization method (``method``).
        option: N-gram unit (``ngramOpt``) or tree feature (``treeOpt``).
        ngram_size: N-gram size (``ngram``); 1 for tree tokenizers.
        numerator: Class whose characteristic terms get ratios above 1.
        denominator: Class compared against.
        function_words: Optional function word list (``functionWords``).
    """

    corpus_root: Path
    prefix: str
    method: TokenizerMethod
    option: str
    ngram_size: int = 1
    numerator: str = DEFAULT_NUMERATOR
    denominator: str = DEFAULT_DENOMINATOR
    function_words: Optional[Path] = None

    @property
    def corpus_path(self) -> Path:
        return self.corpus_root / self.prefix

    def with_pair(self, numerator: str | None, denominator: str | None) -> "FeatureConfig":
        """Copy of the config with the class pair overridden."""
        numerator = numerator or self.numerator
        denominator = denominator or self.denominator
        _check_pair(numerator, denominator)
        return FeatureConfig(
            corpus_root=self.corpus_root,
            prefix=self.prefix,
            method=self.method,
            option=self.option,
            ngram_size=self.ngram_size,
            numerator=numerator,
            denominator=denominator,
            function_words=self.function_words,
        )

    @classmethod
    def from_mapping(cls, raw: Mapping, base_dir: Path | None = None) -> "FeatureConfig":
        """Validate a raw key/value mapping.

        Args:
            raw: Mapping as read from the configuration file.
            base_dir: Directory relative paths are resolved against.

        Raises:
            ConfigurationError: If a required key is missing or invalid.
            UnknownMethodError: If the method or its option is unknown.
        """
        base_dir = base_dir or Path.cwd()
        values = {str(k): str(v).strip() for k, v in raw.items() if v is not None}

        prefix = _require(values, "prefix")
        method_name = _require(values, "method")
        try:
            method = TokenizerMethod(method_name)
        except ValueError:
            raise UnknownMethodError(
                f"Method '{method_name}' was not able to be determined; "
                f"expected 'ngram' or 'tree'"
            ) from None

        ngram_size = 1
        if method is TokenizerMethod.NGRAM:
            option = _require(values, "ngramOpt")
            _check_option(NgramType, option, "ngramOpt")
            ngram_size = _parse_ngram(_require(values, "ngram"))
        else:
            option = _require(values, "treeOpt")
            _check_option(TreeFeatureType, option, "treeOpt")

        numerator = values.get("numerator") or DEFAULT_NUMERATOR
        denominator = values.get("denominator") or DEFAULT_DENOMINATOR
        _check_pair(numerator, denominator)

        function_words = values.get("functionWords")

        return cls(
            corpus_root=_resolve(values.get("corpusRoot", "."), base_dir),
            prefix=prefix,
            method=method,
            option=option,
            ngram_size=ngram_size,
            numerator=numerator,
            denominator=denominator,
            function_words=_resolve(function_words, base_dir) if function_words else None,
        )


def _require(values: dict[str, str], key: str) -> str:
    value = values.get(key)
    if not value:
        raise ConfigurationError(f"Missing required configuration key '{key}'")
    return value


def _check_option(enum_cls, value: str, key: str) -> None:
    if value not in {e.value for e in enum_cls}:
        choices = ", ".join(e.value for e in enum_cls)
        raise UnknownMethodError(f"Unknown {key} '{value}'. Expected one of: {choices}")


def _check_pair(numerator: str, denominator: str) -> None:
    if numerator == denominator:
        raise ConfigurationError(
            f"Numerator and denominator classes must differ (both '{numerator}')"
        )


def _parse_ngram(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise ConfigurationError(f"'ngram' must be an integer, got '{value}'") from None
    if n < 1:
        raise ConfigurationError(f"'ngram' must be at least 1, got {n}")
    return n


def _resolve(value: str, base_dir: Path) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else base_dir / path


def load_config(path: str | Path) -> FeatureConfig:
    """Read and validate a YAML configuration file.

    Relative paths inside the file resolve against the file's directory.

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or a key
            is missing or invalid.
        UnknownMethodError: If the method or its option is unknown.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")

    return FeatureConfig.from_mapping(raw, base_dir=path.resolve().parent)
