# newscheck/services/llm_agent.py
"""
Remote classifier backed by the OpenAI chat-completions API.

 - Sends the normalized analyzable text with a fixed system instruction.
 - One attempt only (max_retries=0) under its own timeout.
 - The reply is untrusted: it must be strict JSON matching RemoteVerdict,
   otherwise MalformedUpstreamResponse is raised. Nothing is repaired.
"""

import json
import logging
from functools import lru_cache
from typing import Any, Optional

import openai
from openai import OpenAI
from pydantic import ValidationError

from newscheck.config import Config
from newscheck.errors import ClassifierUnavailable, MalformedUpstreamResponse, UpstreamError
from newscheck.models.schema import RemoteVerdict, Verdict
from newscheck.services.credibility import build_verdict

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an expert fake news detection system. Analyze the provided content and determine if it's likely fake news, real news, or uncertain.

IMPORTANT: Consider the source domain when provided. Established news organizations (BBC, Reuters, AP, CNN, Times of India, The Guardian, etc.) are generally credible unless the content itself shows clear manipulation.

For URL-based analysis: Consider both the source domain reputation AND the content quality.
For manual input: Focus on content analysis only.

Respond ONLY with valid JSON in this exact format:
{
  "verdict": "Likely Fake" | "Likely Real" | "Uncertain",
  "confidence": <number between 60-95>,
  "reasons": [<array of 2-4 specific, actionable reasons as strings>]
}

Key indicators of FAKE news:
- Unknown or suspicious source domains
- Sensational/clickbait language ("SHOCKING", "You won't believe")
- Emotional manipulation and fear-mongering
- Implausible or extraordinary claims without evidence
- Poor grammar or unprofessional writing
- Lack of credible sources or attribution
- Conspiracy theory language
- Extreme bias or one-sided narrative

Key indicators of REAL news:
- Established, reputable news organization
- Professional, neutral tone
- Credible source attribution
- Balanced perspective
- Verifiable facts and data
- Proper grammar and structure
- Reasonable, plausible claims
- Multiple sources cited

Only use "Uncertain" when the content is genuinely ambiguous or needs more context to determine credibility."""

TEMPERATURE = 0.3
MAX_TOKENS = 500


def _reply_content(resp: Any) -> str:
    """Pull the first choice's message text out of a chat completion."""
    try:
        content = resp.choices[0].message.content
    except (AttributeError, IndexError, TypeError) as e:
        raise MalformedUpstreamResponse() from e
    if not isinstance(content, str) or not content.strip():
        raise MalformedUpstreamResponse()
    return content.strip()


def parse_remote_verdict(raw: str) -> RemoteVerdict:
    try:
        return RemoteVerdict.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as e:
        logger.warning("rejected remote classifier reply: %s", raw[:200])
        raise MalformedUpstreamResponse() from e


class RemoteClassifier:
    def __init__(self, client: Optional[Any] = None, model: Optional[str] = None,
                 api_key: Optional[str] = None, timeout: Optional[float] = None):
        self.model = model or Config.OPENAI_MODEL
        self.client = client
        if self.client is None:
            key = api_key or Config.OPENAI_KEY
            if key:
                self.client = OpenAI(
                    api_key=key,
                    timeout=timeout or Config.OPENAI_TIMEOUT,
                    max_retries=0,
                )

    @property
    def available(self) -> bool:
        return self.client is not None

    def classify(self, analyzable_text: str) -> Verdict:
        if not self.available:
            raise ClassifierUnavailable()

        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": analyzable_text},
        ]
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
                response_format={"type": "json_object"},
            )
        except openai.APIStatusError as e:
            logger.warning("remote classifier answered %s: %s", e.status_code, str(e)[:200])
            raise UpstreamError(status_code=e.status_code) from e
        except openai.APIConnectionError as e:
            logger.warning("remote classifier unreachable: %s", str(e)[:200])
            raise UpstreamError() from e

        remote = parse_remote_verdict(_reply_content(resp))
        return build_verdict(remote.verdict, remote.confidence, list(remote.reasons))


@lru_cache(maxsize=1)
def get_remote_classifier() -> RemoteClassifier:
    """Process-wide classifier; its OpenAI client and connection pool are shared."""
    return RemoteClassifier()
