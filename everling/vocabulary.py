"""
everling/vocabulary.py - Vocabulary Store

Four word classes per language, a deduplicating merge, and the JSON vocabulary
file (load / persist). VocabularyRepository owns the file and serializes the
read-merge-persist sequence.

File layout:
    {"english": {"nouns": [...], "particles": [...], "verbs": [...], "adverbs": [...]},
     "japanese": {...}, "chinese": {...}}
"""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from jsonschema import Draft202012Validator

from receipts import emit_receipt

from .constants import Language, WORD_CLASSES, VOCABULARY_FILE
from .errors import IoError, SerializationError

__all__ = [
    "VocabularyData",
    "VocabularyRepository",
    "LanguageVocabularies",
    "default_vocabularies",
    "path_lock",
    "load",
    "persist",
]


@dataclass
class VocabularyData:
    """
    Words for one language, by class.

    Lists are order-stable so index lookups during sentence assembly are
    reproducible. After merge() no class holds the same word twice.
    """
    nouns: List[str] = field(default_factory=list)
    particles: List[str] = field(default_factory=list)
    verbs: List[str] = field(default_factory=list)
    adverbs: List[str] = field(default_factory=list)

    def merge(self, other: "VocabularyData") -> "VocabularyData":
        """
        Union each class with other's, in place.

        The union is stored sorted, so merging is idempotent and its result
        does not depend on argument order or on which process ran it.

        Returns:
            self, for chaining
        """
        for word_class in WORD_CLASSES:
            union = set(getattr(self, word_class)) | set(getattr(other, word_class))
            setattr(self, word_class, sorted(union))
        return self

    def total(self) -> int:
        """Number of words across all classes."""
        return sum(len(getattr(self, c)) for c in WORD_CLASSES)

    def is_empty(self) -> bool:
        return self.total() == 0

    def class_sets(self) -> Dict[str, frozenset]:
        """Set content per class, for order-insensitive comparison."""
        return {c: frozenset(getattr(self, c)) for c in WORD_CLASSES}

    def counts(self) -> Dict[str, int]:
        return {c: len(getattr(self, c)) for c in WORD_CLASSES}

    def copy(self) -> "VocabularyData":
        return VocabularyData(**{c: list(getattr(self, c)) for c in WORD_CLASSES})

    def to_dict(self) -> Dict[str, List[str]]:
        return {c: list(getattr(self, c)) for c in WORD_CLASSES}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VocabularyData":
        return cls(**{c: list(data.get(c, [])) for c in WORD_CLASSES})


LanguageVocabularies = Dict[Language, VocabularyData]


# =============================================================================
# Built-in defaults
# =============================================================================

_DEFAULTS: Dict[Language, Dict[str, List[str]]] = {
    Language.ENGLISH: {
        "nouns": ["Silence", "Thought", "Abyss", "Radiance", "Logic", "Concept",
                  "Harmony", "Atom", "Transcendence", "Structure", "Echo", "Entropy"],
        "particles": ["is", "towards", "within", "through", "beyond", "under"],
        "verbs": ["accelerating", "collapsing", "resonating", "returning",
                  "constructed", "sublimating", "drifting"],
        "adverbs": ["Faintly", "Gradually", "Inevitably", "Suddenly", "Infinite"],
    },
    Language.JAPANESE: {
        "nouns": ["静寂", "思考", "深淵", "光輝", "論理", "概念",
                  "調和", "原子", "超越", "構造", "残響", "熱量"],
        "particles": ["は", "へと", "の中で", "を通して", "を超えて", "の下で"],
        "verbs": ["加速している", "崩壊している", "共鳴している", "回帰している",
                  "構築される", "昇華する", "漂流する"],
        "adverbs": ["微かに", "徐々に", "必然的に", "突如として", "限りなく"],
    },
    Language.CHINESE: {
        "nouns": ["宁静", "思考", "深渊", "光辉", "逻辑", "概念",
                  "和谐", "原子", "超越", "结构", "残响", "热量"],
        "particles": ["是", "向着", "在其中", "通过", "超越", "之下"],
        "verbs": ["加速", "崩塌", "共鸣", "回归", "构建", "升华", "漂流"],
        "adverbs": ["隐约地", "逐渐地", "必然地", "突然地", "无限地"],
    },
}


def default_vocabularies() -> LanguageVocabularies:
    """Fresh copy of the hand-authored vocabulary, non-empty in every class."""
    return {lang: VocabularyData.from_dict(words) for lang, words in _DEFAULTS.items()}


# =============================================================================
# JSON Schema (Draft 2020-12)
# =============================================================================

_VOCAB_DATA_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": list(WORD_CLASSES),
    "properties": {
        c: {"type": "array", "items": {"type": "string"}, "minItems": 1}
        for c in WORD_CLASSES
    },
}

_JSON_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "LanguageVocabularies",
    "type": "object",
    "required": [lang.value for lang in Language],
    "properties": {lang.value: _VOCAB_DATA_SCHEMA for lang in Language},
}

Draft202012Validator.check_schema(_JSON_SCHEMA)
_VALIDATOR = Draft202012Validator(_JSON_SCHEMA)


def _validate(data: Any, source: str) -> None:
    errors = sorted(_VALIDATOR.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        details = "\n".join(
            f"  - {'/'.join(str(p) for p in e.path) or '<root>'}: {e.message}" for e in errors
        )
        raise SerializationError(f"Vocabulary file {source} does not match schema:\n{details}")


# =============================================================================
# Module-Level Functions
# =============================================================================

def load(path: Union[str, Path] = VOCABULARY_FILE) -> LanguageVocabularies:
    """
    Load every language's vocabulary.

    Args:
        path: Vocabulary JSON file

    Returns:
        Vocabulary per language; the built-in defaults when the file does not exist

    Raises:
        IoError: File exists but cannot be read
        SerializationError: Content is not valid JSON or violates the schema
    """
    path_obj = Path(path)
    if not path_obj.exists():
        return default_vocabularies()

    try:
        content = path_obj.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise IoError(f"Cannot read vocabulary file {path}: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Vocabulary file {path} is not valid JSON: {e}") from e

    _validate(data, str(path))
    return {lang: VocabularyData.from_dict(data[lang.value]) for lang in Language}


def persist(path: Union[str, Path], vocabularies: LanguageVocabularies) -> dict:
    """
    Serialize all languages and overwrite the file.

    Returns:
        vocabulary_persist receipt

    Raises:
        IoError: File or its directory cannot be written
    """
    path_obj = Path(path)
    data = {lang.value: vocabularies[lang].to_dict() for lang in Language}
    content = json.dumps(data, indent=2, ensure_ascii=False)

    try:
        path_obj.parent.mkdir(parents=True, exist_ok=True)
        path_obj.write_text(content + "\n", encoding="utf-8")
    except OSError as e:
        raise IoError(f"Cannot write vocabulary file {path}: {e}") from e

    return emit_receipt("vocabulary_persist", {
        "tenant_id": "vocabulary",
        "path": str(path_obj),
        "counts": {lang.value: vocabularies[lang].total() for lang in Language},
    })


# One lock per resolved file path, shared by every repository on that file
_PATH_LOCKS: Dict[Path, threading.Lock] = {}
_PATH_LOCKS_GUARD = threading.Lock()


def path_lock(path: Union[str, Path]) -> threading.Lock:
    """The process-wide lock for a vocabulary file."""
    key = Path(path).resolve()
    with _PATH_LOCKS_GUARD:
        lock = _PATH_LOCKS.get(key)
        if lock is None:
            lock = _PATH_LOCKS[key] = threading.Lock()
        return lock


class VocabularyRepository:
    """
    Single-writer store for the vocabulary file.

    Hold `lock` across any read-modify-persist sequence so concurrent
    callers cannot interleave a read and a write. Repositories on the
    same file share one lock.
    """

    def __init__(self, path: Union[str, Path] = VOCABULARY_FILE):
        self.path = Path(path)
        self.lock = path_lock(self.path)

    def load(self) -> LanguageVocabularies:
        return load(self.path)

    def persist(self, vocabularies: LanguageVocabularies) -> dict:
        return persist(self.path, vocabularies)

    def exists(self) -> bool:
        return self.path.exists()

    def __repr__(self) -> str:
        return f"VocabularyRepository({str(self.path)!r})"
