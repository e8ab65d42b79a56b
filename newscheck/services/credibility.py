# newscheck/services/credibility.py
"""
Credibility verdict engine.
Combines the six detector sub-scores into a total, maps the total to a
verdict category and confidence, and explains the verdict with a short list
of reasons. Everything here is pure: the same FeatureSet always yields the
same Verdict.
"""

import logging
from typing import Callable, Dict, List, Tuple

from newscheck.models.schema import (
    INVALID_INPUT,
    LIKELY_FAKE,
    LIKELY_REAL,
    UNCERTAIN,
    FeatureSet,
    Verdict,
)
from newscheck.services.features import extract_features

logger = logging.getLogger(__name__)

FAKE_THRESHOLD = 40
REAL_THRESHOLD = -20
MAX_CONFIDENCE = 95
MIN_UNCERTAIN_CONFIDENCE = 50
MAX_REASONS = 3

NO_CONTENT_REASON = "No content provided for analysis"

VERDICT_COLORS: Dict[str, Dict[str, str]] = {
    LIKELY_FAKE: {
        "color": "text-red-600",
        "bgColor": "bg-red-50",
        "borderColor": "border-red-200",
    },
    LIKELY_REAL: {
        "color": "text-green-600",
        "bgColor": "bg-green-50",
        "borderColor": "border-green-200",
    },
    UNCERTAIN: {
        "color": "text-yellow-600",
        "bgColor": "bg-yellow-50",
        "borderColor": "border-yellow-200",
    },
    INVALID_INPUT: {
        "color": "text-gray-600",
        "bgColor": "bg-gray-50",
        "borderColor": "border-gray-200",
    },
}

Rule = Tuple[Callable[[FeatureSet], bool], str]

FAKE_RULES: List[Rule] = [
    (lambda f: f.sensational.count > 2, "Contains excessive sensational language"),
    (lambda f: f.emotional.score > 15, "Uses highly emotional and manipulative language"),
    (lambda f: f.clickbait.score > 10, "Shows strong clickbait characteristics"),
    (lambda f: f.writing_quality.score < 10, "Poor writing quality and structure"),
    (lambda f: f.fact_check.warning_count > 0, "Contains unverified claims and speculation"),
]

REAL_RULES: List[Rule] = [
    (lambda f: f.source_citation.source_mentions > 0, "Cites credible sources and references"),
    (lambda f: f.writing_quality.score > 15, "Professional writing quality and structure"),
    (lambda f: f.fact_check.fact_check_count > 0, "Contains fact-checking indicators"),
    (lambda f: f.sensational.count == 0, "Uses neutral, professional language"),
]

UNCERTAIN_RULES: List[Rule] = [
    (
        lambda f: f.sensational.count > 0 and f.source_citation.source_mentions > 0,
        "Mixed signals: sensational language with sources",
    ),
    (lambda f: 10 <= f.writing_quality.score <= 15, "Average writing quality, needs more analysis"),
    (lambda f: 0 < f.emotional.score < 15, "Some emotional language but not excessive"),
]

RULES: Dict[str, List[Rule]] = {
    LIKELY_FAKE: FAKE_RULES,
    LIKELY_REAL: REAL_RULES,
    UNCERTAIN: UNCERTAIN_RULES,
}

FALLBACK_REASONS: Dict[str, Tuple[str, ...]] = {
    LIKELY_FAKE: ("Multiple fake news indicators detected",),
    LIKELY_REAL: ("Shows characteristics of legitimate journalism",),
    UNCERTAIN: (
        "Insufficient evidence for clear classification",
        "Requires human fact-checking",
        "Mixed credibility indicators",
    ),
}


def colors_for(category: str) -> Dict[str, str]:
    """Display metadata for a category; unknown categories look Uncertain."""
    return dict(VERDICT_COLORS.get(category, VERDICT_COLORS[UNCERTAIN]))


def total_score(features: FeatureSet) -> int:
    return (
        features.sensational.score
        + features.emotional.score
        + features.writing_quality.score
        + features.fact_check.score
        - features.source_citation.score
        + features.clickbait.score
    )


def categorize(total: float) -> Tuple[str, float]:
    """Map a total score to (category, confidence)."""
    confidence = min(abs(total) + 60, MAX_CONFIDENCE)
    if total > FAKE_THRESHOLD:
        return LIKELY_FAKE, confidence
    if total < REAL_THRESHOLD:
        return LIKELY_REAL, confidence
    return UNCERTAIN, max(confidence - 20, MIN_UNCERTAIN_CONFIDENCE)


def aggregate(features: FeatureSet) -> Tuple[str, float]:
    return categorize(total_score(features))


def generate_reasons(category: str, features: FeatureSet) -> List[str]:
    """Ordered, capped justifications for a category. Never empty."""
    if category not in RULES:
        return [NO_CONTENT_REASON]

    reasons = []
    for matches, message in RULES[category]:
        if matches(features):
            reasons.append(message)
            if len(reasons) == MAX_REASONS:
                break

    if not reasons:
        reasons.extend(FALLBACK_REASONS[category][:MAX_REASONS])
    return reasons


def build_verdict(category: str, confidence: float, reasons: List[str]) -> Verdict:
    return Verdict(verdict=category, confidence=confidence, reasons=reasons, **colors_for(category))


def invalid_input_verdict() -> Verdict:
    return build_verdict(INVALID_INPUT, 0, [NO_CONTENT_REASON])


def verdict_from_features(features: FeatureSet) -> Verdict:
    category, confidence = aggregate(features)
    return build_verdict(category, confidence, generate_reasons(category, features))


def analyze_content(text: str) -> Verdict:
    """
    Heuristic classification of analyzable text.
    Blank text yields the Invalid Input verdict with confidence 0.
    """
    if not text or not text.strip():
        return invalid_input_verdict()

    features = extract_features(text)
    verdict = verdict_from_features(features)
    logger.debug("heuristic total=%s verdict=%s", total_score(features), verdict.verdict)
    return verdict
