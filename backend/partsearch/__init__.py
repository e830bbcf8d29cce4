"""Multi-vendor part search: scrape vendor search pages and merge the hits."""

from .dispatcher import SearchValidationError, search_websites
from .schemas import SearchRequest, SearchResponse, SearchResult
from .scraper import scrape_site

__all__ = [
    "SearchRequest",
    "SearchResponse",
    "SearchResult",
    "SearchValidationError",
    "scrape_site",
    "search_websites",
]
