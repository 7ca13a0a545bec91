import logging

import requests
from bs4 import BeautifulSoup
from bs4.dammit import EncodingDetector

import config
from services.models import ScrapeResult

logger = logging.getLogger(__name__)


def fetch_page(url: str):
    """Download raw page bytes and the charset the server declared, if any.

    Non-2xx responses raise.
    """
    headers = {"User-Agent": config.SCRAPE_USER_AGENT}
    resp = requests.get(url, headers=headers, timeout=config.SCRAPE_TIMEOUT)
    resp.raise_for_status()

    declared = None
    if "charset=" in resp.headers.get("Content-Type", "").lower():
        declared = resp.encoding
    return resp.content, declared


def _meta_content(soup, **attrs):
    tag = soup.find("meta", attrs=attrs)
    if tag and tag.get("content"):
        return tag["content"].strip() or None
    return None


def parse_product_page(html, encoding=None) -> ScrapeResult:
    """Extract the first h1 and the meta description from page markup.

    Bytes are decoded with `encoding`, else the page's <meta charset>, else UTF-8.
    """
    if isinstance(html, bytes):
        encoding = encoding or EncodingDetector.find_declared_encoding(html, is_html=True) or "utf-8"
        soup = BeautifulSoup(html, "html.parser", from_encoding=encoding)
    else:
        soup = BeautifulSoup(html, "html.parser")

    heading = None
    h1 = soup.find("h1")
    if h1:
        heading = h1.get_text().strip() or None

    description = (
        _meta_content(soup, name="description")
        or _meta_content(soup, property="og:description")
    )

    return ScrapeResult(heading=heading, description=description)


def scrape_product_page(url: str) -> ScrapeResult:
    """Scrape product page and return heading and description."""
    logger.info("Scraping %s", url)
    content, encoding = fetch_page(url)
    result = parse_product_page(content, encoding)
    logger.info("Scraped %s heading=%r has_description=%s", url, result.heading, bool(result.description))
    return result
