import logging
import re
from typing import List, Optional
from urllib.parse import quote, urlparse

logger = logging.getLogger(__name__)

# Vendor search-path conventions: generic, Amazon-style, PHP storefronts, Magento
SEARCH_PATH_TEMPLATES = [
    "/search?q={query}",
    "/s?k={query}",
    "/search.php?search_query={query}",
    "/catalogsearch/result/?q={query}",
]

_WHITESPACE = re.compile(r"\s+")


def validate_url(url: str) -> str:
    """Validate and fix URL by adding scheme if missing"""
    url = url.strip()

    # Check if URL has a scheme
    parsed = urlparse(url)
    if not parsed.scheme:
        url = f"https://{url}"
        logger.info(f"Added scheme to URL: {url}")

    # Validate the URL has both scheme and netloc
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"Invalid URL format: {url}")

    return url.rstrip("/")


def build_query(part_name: Optional[str], part_number: Optional[str]) -> str:
    """Join the non-empty search terms with a single space."""
    return " ".join(term for term in (part_name, part_number) if term)


def encode_query(query: str) -> str:
    # Same escaping as JavaScript's encodeURIComponent
    return quote(query, safe="!'()*")


def build_search_urls(website: str, query: str) -> List[str]:
    """
    Candidate search URLs for a site, in the order they should be tried.

    Args:
        website (str): Normalized site base URL without trailing slash.
        query (str): Raw (unencoded) search query.

    Returns:
        list: One URL per entry in SEARCH_PATH_TEMPLATES.
    """
    encoded = encode_query(query)
    return [website + template.format(query=encoded) for template in SEARCH_PATH_TEMPLATES]


def hostname_of(url: str) -> str:
    return urlparse(url).hostname or ""


def clean_text(text: str, limit: int) -> str:
    """Collapse whitespace runs to single spaces and cut to `limit` characters."""
    return _WHITESPACE.sub(" ", text).strip()[:limit]


def mentions_any(haystacks: List[str], needles: List[Optional[str]]) -> bool:
    """
    Case-insensitive check that some needle occurs in some haystack.

    A missing or empty needle matches everything, so a search given only a
    name (or only a number) accepts any card.
    """
    terms = [(needle or "").lower() for needle in needles]
    lowered = [haystack.lower() for haystack in haystacks]
    return any(term in haystack for term in terms for haystack in lowered)
