"""Fan a search out to every requested site and merge what comes back."""
import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List

from .schemas import SearchRequest, SearchResponse, SearchResult
from .scraper import scrape_site

logger = logging.getLogger(__name__)


class SearchValidationError(Exception):
    """Raised when a search request is missing its terms or its websites."""


def validate_request(request: SearchRequest) -> None:
    if not request.part_name and not request.part_number:
        raise SearchValidationError("Part name or part number is required")

    if not request.websites:
        raise SearchValidationError("At least one website is required")


def dedupe_by_url(results: List[SearchResult]) -> List[SearchResult]:
    """
    Keep one result per URL.

    The last result seen for a URL wins, but it keeps the position where
    that URL first appeared.
    """
    unique: Dict[str, SearchResult] = {}
    for result in results:
        unique[result.url] = result
    return list(unique.values())


async def search_websites(request: SearchRequest) -> SearchResponse:
    """
    Scrape every requested site concurrently and return the merged hits.

    Each site gets its own worker thread from a pool sized to the request,
    so every scrape starts at once; the call returns once all of them have
    finished.
    """
    validate_request(request)

    loop = asyncio.get_running_loop()
    with ThreadPoolExecutor(max_workers=len(request.websites)) as pool:
        per_site = await asyncio.gather(*(
            loop.run_in_executor(pool, scrape_site, website, request.part_name, request.part_number)
            for website in request.websites
        ))

    for website, site_results in zip(request.websites, per_site):
        logger.info(f"🔍 {website}: {len(site_results)} results")

    merged = dedupe_by_url([result for site_results in per_site for result in site_results])
    return SearchResponse(results=merged, count=len(merged))
