from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional

Category = Literal["Likely Fake", "Likely Real", "Uncertain"]

LIKELY_FAKE = "Likely Fake"
LIKELY_REAL = "Likely Real"
UNCERTAIN = "Uncertain"
INVALID_INPUT = "Invalid Input"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# -----------------------------
# REQUEST / CONTENT
# -----------------------------
class DetectRequest(BaseModel):
    text: Optional[str] = None
    headline: Optional[str] = None
    url: Optional[str] = None

    def is_empty(self) -> bool:
        return not any((v or "").strip() for v in (self.text, self.headline, self.url))


class NormalizedContent(_Frozen):
    source_domain: Optional[str] = None
    title: str = ""
    description: str = ""
    body_text: str = ""
    analyzable_text: str = ""


# -----------------------------
# DETECTOR RESULTS
# -----------------------------
class SensationalResult(_Frozen):
    count: int = 0
    score: int = 0


class EmotionalResult(_Frozen):
    emotional_word_count: int = 0
    excessive_caps: int = 0
    excessive_exclamation: int = 0
    score: int = 0


class SourceCitationResult(_Frozen):
    source_mentions: int = 0
    score: int = 0


class WritingQualityResult(_Frozen):
    avg_words_per_sentence: float = 0.0
    short_sentences: int = 0
    long_sentences: int = 0
    grammar_issues: int = 0
    score: int = 0


class FactCheckResult(_Frozen):
    fact_check_count: int = 0
    warning_count: int = 0
    score: int = 0


class ClickbaitResult(_Frozen):
    numbers: int = 0
    questions: int = 0
    superlatives: int = 0
    urgency_words: int = 0
    score: int = 0


class FeatureSet(_Frozen):
    sensational: SensationalResult = SensationalResult()
    emotional: EmotionalResult = EmotionalResult()
    source_citation: SourceCitationResult = SourceCitationResult()
    writing_quality: WritingQualityResult = WritingQualityResult()
    fact_check: FactCheckResult = FactCheckResult()
    clickbait: ClickbaitResult = ClickbaitResult()


# -----------------------------
# VERDICTS
# -----------------------------
class Verdict(_Frozen):
    # serialized with the camelCase colour keys the frontend stores verbatim
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    verdict: str
    confidence: float = Field(ge=0, le=100)
    reasons: List[str] = Field(min_length=1, max_length=4)
    color: str
    bg_color: str = Field(alias="bgColor")
    border_color: str = Field(alias="borderColor")


class RemoteVerdict(_Frozen):
    """Strict shape of the remote classifier's JSON answer."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    verdict: Category
    confidence: float = Field(ge=60, le=95)
    reasons: List[str] = Field(min_length=2, max_length=4)

    @field_validator("reasons")
    @classmethod
    def _non_blank(cls, v: List[str]) -> List[str]:
        if any(not r.strip() for r in v):
            raise ValueError("reasons must be non-empty strings")
        return v


class DetectResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    verdict: str
    confidence: float
    reasons: List[str]
    color: str
    bg_color: str = Field(alias="bgColor")
    border_color: str = Field(alias="borderColor")
    source: Literal["heuristic", "remote"]
    source_domain: Optional[str] = None
