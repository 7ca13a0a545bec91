"""
Defensive parsing of completion output into AdItem lists.

Parser strategies run in order and each returns a list or None; the first
list wins. Items are then truncated, trimmed and filtered.
"""

import json
import logging

from services.errors import AdParseError, InsufficientAdsError
from services.models import AdItem

logger = logging.getLogger(__name__)


def _load_json(raw):
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        return None


def parse_bare_array(raw):
    data = _load_json(raw)
    return data if isinstance(data, list) else None


def parse_ads_field(raw):
    data = _load_json(raw)
    if isinstance(data, dict) and isinstance(data.get("ads"), list):
        return data["ads"]
    return None


def parse_bracketed_slice(raw):
    """Parse the text between the first '[' and the last ']'."""
    start = raw.find("[")
    end = raw.rfind("]")
    if start == -1 or end <= start:
        return None
    data = _load_json(raw[start:end + 1])
    return data if isinstance(data, list) else None


PARSER_STRATEGIES = (parse_bare_array, parse_ads_field, parse_bracketed_slice)


def extract_ad_list(raw):
    """Run the parser strategies; raise AdParseError if none yields items."""
    raw = raw or ""
    items = None
    for strategy in PARSER_STRATEGIES:
        items = strategy(raw)
        if items is not None:
            break

    if not items:
        logger.warning("Could not parse ads from completion output: %.200s", raw)
        raise AdParseError(raw)
    return items


def normalize_ads(raw, limit=3, minimum=3):
    """Parse raw completion text into at least `minimum` complete AdItems.

    `limit` caps how many items are considered (None keeps all of them).
    """
    items = extract_ad_list(raw)
    if limit is not None:
        items = items[:limit]

    ads = [ad for ad in (AdItem.from_raw(item) for item in items) if ad.is_complete()]

    if not ads or len(ads) < minimum:
        logger.warning("Only %d valid ads recovered, %d required", len(ads), minimum)
        raise InsufficientAdsError(ads)
    return ads
