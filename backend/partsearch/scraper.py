"""
Per-site scraping heuristic.

A site is searched by trying a fixed list of search-URL conventions in
order. The first page that yields accepted hits wins; the hits come from
the first selector group that matches anything usable. When nothing is
found the site gets a single "click to search" result pointing at its
first candidate URL.
"""
import logging
from typing import Callable, List, Optional, Tuple
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from . import config
from .schemas import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, SearchResult
from .utils import (
    build_query,
    build_search_urls,
    clean_text,
    hostname_of,
    mentions_any,
    validate_url,
)

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description available"

TITLE_SELECTOR = 'h2, h3, h4, .title, .name, [class*="title"], [class*="name"]'
DESCRIPTION_SELECTOR = '.description, .desc, p, [class*="description"]'
RAW_DESCRIPTION_LIMIT = 200


def own_text(element: Tag) -> str:
    """Text held directly by the element, ignoring its child elements."""
    return "".join(
        str(child) for child in element.children
        if isinstance(child, NavigableString) and not isinstance(child, Comment)
    ).strip()


def first_text(element: Tag, selector: str) -> str:
    match = element.select_one(selector)
    return match.get_text().strip() if match else ""


def extract_candidate(element: Tag, website: str) -> Tuple[str, str, str]:
    """Pull a (title, link, description) triple out of a matched element."""
    first_link = element.find("a")

    title = (
        first_text(element, TITLE_SELECTOR)
        or (first_link.get_text().strip() if first_link else "")
        or element.get_text().strip().split("\n")[0]
    )

    link = (first_link.get("href") if first_link else None) or element.get("href") or ""
    if link and not link.startswith("http"):
        link = urljoin(website, link)

    description = (
        first_text(element, DESCRIPTION_SELECTOR)
        or own_text(element)[:RAW_DESCRIPTION_LIMIT]
    )

    return (
        clean_text(title, TITLE_MAX_LENGTH),
        link,
        clean_text(description, DESCRIPTION_MAX_LENGTH),
    )


# Selector groups in priority order; the first group producing an accepted
# hit ends the cascade.
SELECTOR_GROUPS: List[Tuple[str, Callable[[Tag, str], Tuple[str, str, str]]]] = [
    # Product cards
    ('.product-item, .product, .item, [data-product], .search-result', extract_candidate),
    # List items
    ('li[class*="product"], li[class*="item"], li[class*="result"]', extract_candidate),
    # Links with product info
    ('a[class*="product"], a[href*="product"], a[href*="part"]', extract_candidate),
]


def extract_results(
    html: str,
    website: str,
    part_name: Optional[str],
    part_number: Optional[str],
) -> List[SearchResult]:
    """Run the selector cascade over one page and return the accepted hits."""
    soup = BeautifulSoup(html, "html.parser")
    source = hostname_of(website)

    for selector, extractor in SELECTOR_GROUPS:
        results = []
        for element in soup.select(selector)[:config.MAX_RESULTS_PER_SITE]:
            title, link, description = extractor(element, website)

            if len(title) <= 3 or not link:
                continue
            if not mentions_any([title, description], [part_name, part_number]):
                continue

            results.append(SearchResult(
                title=title,
                url=link,
                description=description or NO_DESCRIPTION,
                source=source,
            ))

        if results:
            return results

    return []


def fetch_html(session: requests.Session, url: str) -> str:
    res = session.get(
        url,
        headers=config.REQUEST_HEADERS,
        timeout=config.REQUEST_TIMEOUT,
        allow_redirects=True,
    )
    res.raise_for_status()
    return res.text


def fallback_result(website: str, query: str, search_url: str) -> SearchResult:
    hostname = hostname_of(website)
    return SearchResult(
        title=f'Search "{query}" on {hostname}'[:TITLE_MAX_LENGTH],
        url=search_url,
        description=f'Click to search for "{query}" on {hostname}'[:DESCRIPTION_MAX_LENGTH],
        source=hostname,
    )


def scrape_site(website: str, part_name: Optional[str], part_number: Optional[str]) -> List[SearchResult]:
    """
    Search one vendor site for a part.

    Never raises. Returns the hits of the first candidate URL that produced
    any, else a single fallback result linking to the site's own search.
    An unexpected error before the fallback is built (for instance a
    website value with no host) leaves the list empty.
    """
    results: List[SearchResult] = []

    try:
        website = validate_url(website)
        query = build_query(part_name, part_number)
        search_urls = build_search_urls(website, query)

        with requests.Session() as session:
            session.max_redirects = config.MAX_REDIRECTS

            for search_url in search_urls:
                # Hits accumulate across candidates; a failing page adds none
                try:
                    html = fetch_html(session, search_url)
                    results.extend(extract_results(html, website, part_name, part_number))
                except Exception as e:
                    logger.warning(f"Request failed for {search_url}: {str(e)}")
                    continue

                if results:
                    logger.info(f"✅ {len(results)} results from {search_url}")
                    break

        if not results:
            logger.info(f"No matches on {website}, returning search link")
            results.append(fallback_result(website, query, search_urls[0]))

    except Exception as e:
        logger.error(f"Error searching {website}: {str(e)}")

    return results
