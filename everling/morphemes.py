"""
everling/morphemes.py - Morpheme Extraction

Turns a part-of-speech tagged corpus dump (MeCab-style CSV or TSV) into a
VocabularyData. Noisy input degrades gracefully: short lines, empty surface
forms and unknown tags are skipped, never reported.

Layout: header row, then one morpheme per line; field 2 is the surface form,
field 6 the part-of-speech tag.
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from receipts import emit_receipt

from .constants import (
    Language,
    POS_RULES,
    WORD_CLASSES,
    SURFACE_FIELD,
    POS_FIELD,
    MIN_FIELDS,
    QUOTE_CHARS,
)
from .errors import IoError
from .vocabulary import VocabularyData


def split_fields(line: str) -> List[str]:
    """Comma separated when the line holds a comma, tab separated otherwise."""
    if "," in line:
        return line.split(",")
    return line.split("\t")


def classify(tag: str, rules: Tuple[Tuple[str, str], ...]) -> Optional[str]:
    """First word class whose marker occurs in the tag, or None."""
    for marker, word_class in rules:
        if marker in tag:
            return word_class
    return None


def extract(path: Union[str, Path], language: Language = Language.JAPANESE,
            ledger: Optional[list] = None) -> VocabularyData:
    """
    Parse a morpheme table into word classes.

    Args:
        path: Tabular morpheme file
        language: Selects the part-of-speech rules
        ledger: Optional list receiving the morpheme_extraction receipt

    Returns:
        VocabularyData with each class deduplicated, in first-seen order

    Raises:
        IoError: File cannot be opened or decoded
    """
    rules = POS_RULES[Language(language)]
    found = {c: {} for c in WORD_CLASSES}  # dict as insertion-ordered set
    lines_read = 0
    skipped = 0

    try:
        with open(path, "r", encoding="utf-8") as f:
            next(f, None)  # header
            for raw in f:
                lines_read += 1
                fields = split_fields(raw.rstrip("\r\n"))
                if len(fields) < MIN_FIELDS:
                    skipped += 1
                    continue

                surface = fields[SURFACE_FIELD].strip().strip(QUOTE_CHARS).strip()
                if not surface:
                    skipped += 1
                    continue

                word_class = classify(fields[POS_FIELD], rules)
                if word_class is None:
                    skipped += 1
                    continue

                found[word_class][surface] = None
    except (OSError, UnicodeDecodeError) as e:
        raise IoError(f"Cannot read morpheme file {path}: {e}") from e

    vocab = VocabularyData(**{c: list(words) for c, words in found.items()})

    receipt = emit_receipt("morpheme_extraction", {
        "tenant_id": "vocabulary",
        "path": str(path),
        "language": Language(language).value,
        "lines_read": lines_read,
        "lines_skipped": skipped,
        "counts": vocab.counts(),
    })
    if ledger is not None:
        ledger.append(receipt)

    return vocab
