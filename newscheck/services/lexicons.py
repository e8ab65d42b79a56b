# newscheck/services/lexicons.py
"""
Fixed word/phrase tables used by the feature detectors.
All entries are lowercase; matching is case-insensitive substring search.
"""

SENSATIONAL_WORDS = (
    "shocking", "unbelievable", "incredible", "amazing", "outrageous",
    "devastating", "explosive", "breaking", "urgent", "must read",
    "you won't believe", "this will blow your mind", "viral", "trending",
    "exclusive", "leaked", "secret", "hidden", "conspiracy", "cover-up",
)

EMOTIONAL_WORDS = (
    "hate", "love", "angry", "furious", "devastated", "heartbroken",
    "ecstatic", "terrified", "disgusted", "outraged", "shocked",
)

CREDIBILITY_PHRASES = (
    "according to", "study shows", "research indicates", "experts say",
    "official report", "confirmed by", "verified by", "documents show",
    "data reveals", "statistics indicate",
)

FACT_CHECK_PHRASES = (
    "fact check", "verified", "confirmed", "authentic", "genuine",
    "corroborated", "substantiated", "validated", "cross-referenced",
)

HEDGE_PHRASES = (
    "rumor has it", "allegedly", "supposedly", "reportedly", "claims",
    "sources say", "unconfirmed reports", "speculation", "conspiracy theory",
)

SUPERLATIVES = ("best", "worst", "most", "biggest", "smallest", "first", "last")

URGENCY_WORDS = ("now", "today", "immediately", "urgent", "asap")
