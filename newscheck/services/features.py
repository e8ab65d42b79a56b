# newscheck/services/features.py
"""
Linguistic signal detectors.

Each detector is a pure function of the analyzable text and returns a frozen
result model holding its raw counts and a bounded sub-score:
 - sensational language        0..30
 - emotional language          0..25
 - source citations            0..30 (subtracted during aggregation)
 - writing quality             0..20
 - fact-check indicators       0..  (confirmations minus hedges, floored at 0)
 - clickbait                   0..20
"""

import re
from typing import Iterable

from newscheck.models.schema import (
    ClickbaitResult,
    EmotionalResult,
    FactCheckResult,
    FeatureSet,
    SensationalResult,
    SourceCitationResult,
    WritingQualityResult,
)
from newscheck.services.lexicons import (
    CREDIBILITY_PHRASES,
    EMOTIONAL_WORDS,
    FACT_CHECK_PHRASES,
    HEDGE_PHRASES,
    SENSATIONAL_WORDS,
    SUPERLATIVES,
    URGENCY_WORDS,
)

_CAPS_RUN = re.compile(r"[A-Z]{3,}")
_EXCLAMATION_RUN = re.compile(r"!{2,}")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_WHITESPACE = re.compile(r"\s+")
_WORD_PAIR = re.compile(r"\b\w+\b\s+\b\w+\b", re.ASCII)
_NUMBER = re.compile(r"\b\d+\b", re.ASCII)

LONG_TOKEN_CHARS = 15
SHORT_SENTENCE_WORDS = 5
LONG_SENTENCE_WORDS = 25


def _count_hits(text_lower: str, lexicon: Iterable[str]) -> int:
    return sum(1 for term in lexicon if term in text_lower)


def _split_sentences(text: str):
    return [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def count_sensational_words(text: str) -> SensationalResult:
    count = _count_hits((text or "").lower(), SENSATIONAL_WORDS)
    return SensationalResult(count=count, score=min(count * 10, 30))


def analyze_emotional_language(text: str) -> EmotionalResult:
    text = text or ""
    words = _count_hits(text.lower(), EMOTIONAL_WORDS)
    caps = len(_CAPS_RUN.findall(text))
    exclamation = len(_EXCLAMATION_RUN.findall(text))
    return EmotionalResult(
        emotional_word_count=words,
        excessive_caps=caps,
        excessive_exclamation=exclamation,
        score=min(words * 5 + caps * 10 + exclamation * 8, 25),
    )


def analyze_source_mentions(text: str) -> SourceCitationResult:
    count = _count_hits((text or "").lower(), CREDIBILITY_PHRASES)
    return SourceCitationResult(source_mentions=count, score=min(count * 15, 30))


def analyze_writing_quality(text: str) -> WritingQualityResult:
    """
    Sentence/word statistics. A text without terminators is a single
    sentence; with no sentences at all the average is 0 and nothing is
    penalized. Blank text yields the all-zero result.
    """
    text = text or ""
    if not text.strip():
        return WritingQualityResult()
    sentences = _split_sentences(text)

    words = [w for w in _WHITESPACE.split(text) if w]
    lengths = [len(_WHITESPACE.split(s)) for s in sentences]
    short = sum(1 for n in lengths if n < SHORT_SENTENCE_WORDS)
    long_ = sum(1 for n in lengths if n > LONG_SENTENCE_WORDS)

    # adjacent word pairs that contain an abnormally long token
    grammar_issues = sum(
        1 for pair in _WORD_PAIR.findall(text)
        if any(len(w) > LONG_TOKEN_CHARS for w in pair.split())
    )

    return WritingQualityResult(
        avg_words_per_sentence=len(words) / len(sentences) if sentences else 0.0,
        short_sentences=short,
        long_sentences=long_,
        grammar_issues=grammar_issues,
        score=max(0, 20 - short * 2 - long_ * 1 - grammar_issues * 3),
    )


def analyze_fact_check_indicators(text: str) -> FactCheckResult:
    text_lower = (text or "").lower()
    confirmed = _count_hits(text_lower, FACT_CHECK_PHRASES)
    hedges = _count_hits(text_lower, HEDGE_PHRASES)
    return FactCheckResult(
        fact_check_count=confirmed,
        warning_count=hedges,
        score=max(0, confirmed * 10 - hedges * 5),
    )


def analyze_clickbait(text: str) -> ClickbaitResult:
    text = text or ""
    text_lower = text.lower()
    numbers = len(_NUMBER.findall(text))
    questions = text.count("?")
    superlatives = _count_hits(text_lower, SUPERLATIVES)
    urgency = _count_hits(text_lower, URGENCY_WORDS)
    total = numbers + questions + superlatives + urgency
    return ClickbaitResult(
        numbers=numbers,
        questions=questions,
        superlatives=superlatives,
        urgency_words=urgency,
        score=min(total * 2, 20),
    )


def extract_features(text: str) -> FeatureSet:
    return FeatureSet(
        sensational=count_sensational_words(text),
        emotional=analyze_emotional_language(text),
        source_citation=analyze_source_mentions(text),
        writing_quality=analyze_writing_quality(text),
        fact_check=analyze_fact_check_indicators(text),
        clickbait=analyze_clickbait(text),
    )
