"""Translation payload parsing and loading.

Raw payloads are structured-data text, one per language. Parsing is
all-or-nothing: a single bad payload rejects the whole batch.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Mapping, Optional

import yaml

from i18n_provider.core.logging import get_module_logger
from i18n_provider.translation.exceptions import (
    EmptyLanguageSetError,
    InvalidPayloadError,
)
from i18n_provider.translation.models import (
    LanguageCode,
    PayloadFormat,
    TranslationTree,
)

logger = get_module_logger()


def parse_payload(
    language: LanguageCode,
    raw_text: str,
    payload_format: PayloadFormat = PayloadFormat.JSON,
) -> TranslationTree:
    """Parse one language payload into a translation tree.

    Args:
        language: Language code the payload belongs to.
        raw_text: Structured-data text.
        payload_format: Parser to use.

    Returns:
        Parsed translation tree.

    Raises:
        InvalidPayloadError: If the text does not parse, or does not hold an
            object at the top level.
    """
    format_name = payload_format.name
    try:
        if payload_format is PayloadFormat.YAML:
            data = yaml.safe_load(raw_text)
        else:
            data = json.loads(raw_text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        logger.error("payload_parse_error", language=language, error=str(e))
        raise InvalidPayloadError(language, str(e), format_name) from e

    if not isinstance(data, dict):
        logger.error(
            "invalid_payload_format",
            language=language,
            expected="object",
            received=type(data).__name__,
        )
        raise InvalidPayloadError(
            language,
            f"expected an object at the top level, got {type(data).__name__}",
            format_name,
        )

    return data


def parse_payloads(
    raw_translations: Mapping[LanguageCode, str],
    payload_format: PayloadFormat = PayloadFormat.JSON,
) -> Dict[LanguageCode, TranslationTree]:
    """Parse every payload of a batch, keeping the input order.

    Args:
        raw_translations: Raw text by language code.
        payload_format: Parser to use for every payload.

    Returns:
        Parsed trees by language code, in input order.

    Raises:
        EmptyLanguageSetError: If the batch is empty.
        InvalidPayloadError: If any payload fails to parse.
    """
    if not raw_translations:
        raise EmptyLanguageSetError()

    trees: Dict[LanguageCode, TranslationTree] = {}
    for language, raw_text in raw_translations.items():
        trees[language] = parse_payload(language, raw_text, payload_format)

    logger.info(
        "parsed_translation_payloads",
        languages=list(trees),
        payload_format=payload_format.value,
    )
    return trees


class TranslationLoader(ABC):
    """Abstract base for translation sources.

    Implementations return the raw payload text of each language, in the
    order the resolver should see them. The first language is the fallback.
    """

    payload_format: PayloadFormat = PayloadFormat.JSON

    @abstractmethod
    def load(self) -> Dict[LanguageCode, str]:
        """Load raw payload text for every language.

        Returns:
            Raw text by language code, fallback language first.
        """
        pass


class DirectoryTranslationLoader(TranslationLoader):
    """Loader for one-file-per-language translation directories.

    Expects files named <code>.json (or <code>.yml / <code>.yaml for YAML).

    Attributes:
        translations_dir: Directory holding the translation files.
        payload_format: Format of the files, selects the extension.
        languages: Optional explicit language order; the first is the fallback.
    """

    def __init__(
        self,
        translations_dir: Path,
        payload_format: PayloadFormat = PayloadFormat.JSON,
        languages: Optional[List[LanguageCode]] = None,
    ):
        """Initialize directory translation loader.

        Args:
            translations_dir: Path to directory with translation files.
            payload_format: Format of the translation files.
            languages: Explicit language order. Defaults to file name order.

        Raises:
            ValueError: If the directory does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.payload_format = payload_format
        self.languages = list(languages) if languages else None

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_directory_loader",
            translations_dir=str(self.translations_dir),
            payload_format=payload_format.value,
        )

    def discover(self) -> Dict[LanguageCode, Path]:
        """Find translation files in the directory, sorted by file name."""
        found: Dict[LanguageCode, Path] = {}
        for path in sorted(self.translations_dir.iterdir()):
            if path.is_file() and path.suffix in self.payload_format.extensions:
                found.setdefault(path.stem, path)
        return found

    def load(self) -> Dict[LanguageCode, str]:
        """Read every translation file as text.

        Returns:
            Raw text by language code.

        Raises:
            EmptyLanguageSetError: If no translation file is found.
            FileNotFoundError: If an explicitly listed language has no file.
        """
        found = self.discover()

        if self.languages is None:
            ordered = found
        else:
            ordered = {}
            for language in self.languages:
                if language not in found:
                    raise FileNotFoundError(
                        f"No translation file found for language {language} in {self.translations_dir}"
                    )
                ordered[language] = found[language]

        if not ordered:
            raise EmptyLanguageSetError(
                f"No translation files found in {self.translations_dir}"
            )

        raw: Dict[LanguageCode, str] = {}
        for language, path in ordered.items():
            raw[language] = path.read_text(encoding="utf-8")

        logger.info(
            "loaded_translation_files",
            translations_dir=str(self.translations_dir),
            languages=list(raw),
        )
        return raw
