"""
everling/assembler.py - Sentence Assembly

Renders a final state as one sentence: the strongest dimensions pick nouns,
particles and the verb; the peak intensity picks the adverb.
"""

from typing import Dict, List, Tuple

from .constants import Language, WORD_CLASSES, ADVERB_THRESHOLDS, SENTENCE_NOUN_COUNT
from .errors import InvalidConfiguration
from .vocabulary import VocabularyData


def rank_dimensions(state: Dict[int, float]) -> List[Tuple[int, float]]:
    """Entries by descending |value|, ties by ascending dimension index."""
    return sorted(state.items(), key=lambda item: (-abs(item[1]), item[0]))


def adverb_index(intensity: float) -> int:
    for threshold, index in ADVERB_THRESHOLDS:
        if intensity > threshold:
            return index
    return 0


def assemble(state: Dict[int, float], vocabulary: VocabularyData, language: Language) -> str:
    """
    Build the sentence for a final state.

    Args:
        state: Final sparse state
        vocabulary: Words for the target language, every class non-empty
        language: Controls spacing and punctuation

    Returns:
        Assembled sentence
    """
    if not state:
        raise InvalidConfiguration("Cannot assemble a sentence from an empty state")
    empty = [c for c in WORD_CLASSES if not getattr(vocabulary, c)]
    if empty:
        raise InvalidConfiguration(f"Vocabulary has empty word classes: {empty}")

    english = Language(language) == Language.ENGLISH
    nouns, particles = vocabulary.nouns, vocabulary.particles
    verbs, adverbs = vocabulary.verbs, vocabulary.adverbs

    ranked = rank_dimensions(state)
    top_dim, top_value = ranked[0]

    parts = [adverbs[adverb_index(abs(top_value)) % len(adverbs)]]
    parts.append(", " if english else "、")

    for i, (dim, _) in enumerate(ranked[:SENTENCE_NOUN_COUNT]):
        parts.append(nouns[dim % len(nouns)])
        if english:
            parts.append(" ")
        parts.append(particles[(dim + i) % len(particles)])
        if english:
            parts.append(" ")

    parts.append(verbs[top_dim % len(verbs)])
    parts.append("." if english else "。")
    return "".join(parts)
