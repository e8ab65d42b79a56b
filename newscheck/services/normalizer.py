# newscheck/services/normalizer.py
"""
Markup normalizer.
Turns fetched HTML (or raw headline/body input) into NormalizedContent whose
analyzable text is bounded no matter how large the source document is:
 - noise elements (script, style, nav, header, footer) are dropped
 - title and meta description are pulled out before stripping
 - body text has whitespace runs collapsed and is cut to 2,500 characters
"""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup

from newscheck.errors import FetchError
from newscheck.models.schema import NormalizedContent

logger = logging.getLogger(__name__)

BODY_CHAR_LIMIT = 2500
TITLE_CHAR_LIMIT = 300
DESCRIPTION_CHAR_LIMIT = 1000

NOISE_TAGS = ["script", "style", "nav", "header", "footer"]

_WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text or "").strip()


def compose_analyzable_text(domain: str, title: str, description: str, body: str) -> str:
    return f"Source: {domain}\nTitle: {title}\n\n{description}\n\n{body[:BODY_CHAR_LIMIT]}"


def _meta_description(soup: BeautifulSoup) -> str:
    tag = soup.find("meta", attrs={"name": "description"})
    if tag is None:
        return ""
    content = tag.get("content")
    if isinstance(content, list):
        content = " ".join(content)
    return content or ""


def normalize_html(html: str, domain: str) -> NormalizedContent:
    try:
        soup = BeautifulSoup(html or "", "html.parser")

        title = soup.title.get_text().strip() if soup.title else ""
        description = _meta_description(soup)

        for tag in soup.find_all(NOISE_TAGS):
            tag.decompose()

        root = soup.body
        if root is None:
            # fragment without <body>: keep only what a browser would render
            for tag in soup.find_all(["head", "title"]):
                tag.decompose()
            root = soup
        body = collapse_whitespace(root.get_text())
    except Exception as e:
        logger.warning("could not parse markup from %s: %s", domain, str(e)[:200])
        raise FetchError() from e

    title = title[:TITLE_CHAR_LIMIT]
    description = description[:DESCRIPTION_CHAR_LIMIT]
    body = body[:BODY_CHAR_LIMIT]
    return NormalizedContent(
        source_domain=domain,
        title=title,
        description=description,
        body_text=body,
        analyzable_text=compose_analyzable_text(domain, title, description, body),
    )


def normalize_text(headline: Optional[str] = None, body_text: Optional[str] = None) -> NormalizedContent:
    """Content from manual input: headline wins over body, no markup stripping.
    Headline and body are bounded like a fetched title and body."""
    headline = (headline or "")[:TITLE_CHAR_LIMIT]
    body = (body_text or "")[:BODY_CHAR_LIMIT]
    return NormalizedContent(
        title=headline,
        body_text=body,
        analyzable_text=headline or body,
    )
