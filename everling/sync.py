"""
everling/sync.py - Vocabulary Synchronization

Load the persisted vocabulary, fold in freshly extracted morphemes for one
language, and persist only when something new was extracted.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from receipts import emit_receipt

from .constants import Language, MORPHEME_FILE
from .morphemes import extract
from .vocabulary import VocabularyData, VocabularyRepository

logger = logging.getLogger(__name__)


def load_and_sync(language: Language,
                  repository: Optional[VocabularyRepository] = None,
                  morpheme_path: Union[str, Path, None] = MORPHEME_FILE,
                  ledger: Optional[list] = None) -> VocabularyData:
    """
    Vocabulary for one language, merged with any raw morpheme file.

    1. Load every language from the repository (defaults when absent).
    2. If the morpheme file exists, extract it; when anything was found,
       merge into the target language and persist all languages.
       An empty extraction leaves the file untouched and logs a warning.
    3. A missing morpheme file skips extraction.

    Args:
        language: Target language
        repository: Vocabulary file owner (default: VOCABULARY_FILE)
        morpheme_path: Raw morpheme table, None to skip extraction
        ledger: Optional list receiving vocabulary_* receipts

    Returns:
        Snapshot of the target language's vocabulary. Treat as read-only.

    Raises:
        IoError: Vocabulary or morpheme file cannot be read, or persist fails
        SerializationError: Vocabulary file is malformed
    """
    language = Language(language)
    repository = repository if repository is not None else VocabularyRepository()
    receipts = [] if ledger is None else ledger

    with repository.lock:
        vocabularies = repository.load()
        target = vocabularies[language]
        before = target.total()

        if morpheme_path is None or not Path(morpheme_path).exists():
            logger.info(f"No morpheme file at {morpheme_path}; using stored vocabulary")
            status = "no_source"
        else:
            extracted = extract(morpheme_path, language, ledger=receipts)
            if extracted.is_empty():
                logger.warning(f"Morpheme file {morpheme_path} yielded no vocabulary; skipping merge")
                status = "empty_extraction"
            else:
                target.merge(extracted)
                receipts.append(repository.persist(vocabularies))
                status = "merged"

        receipts.append(emit_receipt("vocabulary_sync", {
            "tenant_id": "vocabulary",
            "language": language.value,
            "vocabulary_path": str(repository.path),
            "morpheme_path": None if morpheme_path is None else str(morpheme_path),
            "status": status,
            "words_before": before,
            "words_after": target.total(),
        }))

    return target.copy()
