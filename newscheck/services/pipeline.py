# newscheck/services/pipeline.py
"""
Detection pipeline.

    request → [url: fetch → normalize] → analyzable text
            → heuristic verdict  (features → aggregate → reasons)
              or remote verdict  (OpenAI, strictly validated)
            → response with display metadata

The only state shared between calls is the remote classifier's OpenAI
client, which is thread-safe, so any number of requests may run through
detect() concurrently.
"""

import logging
from typing import Optional

from newscheck.config import Config
from newscheck.errors import InvalidInput
from newscheck.models.schema import DetectRequest, DetectResponse, NormalizedContent
from newscheck.services.credibility import analyze_content
from newscheck.services.llm_agent import RemoteClassifier, get_remote_classifier
from newscheck.services.normalizer import normalize_html, normalize_text
from newscheck.services.scraper import Scraper, validate_url

logger = logging.getLogger(__name__)

CLASSIFIER_MODES = ("heuristic", "remote", "auto")


def acquire(req: DetectRequest) -> NormalizedContent:
    """Normalized content for a request; fetches when a URL is given."""
    url = (req.url or "").strip()
    if url:
        domain = validate_url(url)
        html = Scraper.fetch(url)
        return normalize_html(html, domain)

    headline = req.headline if (req.headline or "").strip() else None
    return normalize_text(headline=headline, body_text=req.text)


def _resolve_mode(mode: Optional[str]) -> str:
    mode = (mode or Config.CLASSIFIER).lower()
    if mode not in CLASSIFIER_MODES:
        logger.warning("unknown classifier mode %r, using heuristic", mode)
        return "heuristic"
    return mode


def detect(req: DetectRequest, mode: Optional[str] = None,
           remote: Optional[RemoteClassifier] = None) -> DetectResponse:
    if req.is_empty():
        raise InvalidInput()

    content = acquire(req)

    source = _resolve_mode(mode)
    if source != "heuristic":
        remote = remote or get_remote_classifier()
        if source == "auto":
            source = "remote" if remote.available else "heuristic"

    if source == "remote":
        verdict = remote.classify(content.analyzable_text)
    else:
        verdict = analyze_content(content.analyzable_text)

    logger.info(
        "verdict=%s confidence=%s source=%s domain=%s",
        verdict.verdict, verdict.confidence, source, content.source_domain,
    )
    return DetectResponse(
        **verdict.model_dump(by_alias=True),
        source=source,
        source_domain=content.source_domain,
    )
