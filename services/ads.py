import logging

from services.completion import ensure_api_key, request_completion
from services.errors import AdParseError, InsufficientAdsError
from services.models import AdItem, GenerationResult, VariantRequest
from services.normalizer import normalize_ads
from services.prompts import (
    AD_COUNT,
    AD_LIST_SCHEMA,
    AD_TRANSLATION_SCHEMA,
    build_prompt,
    build_system_prompt,
    build_translation_prompt,
)
from services.scraper import scrape_product_page

logger = logging.getLogger(__name__)


def generate_ads(gen_request):
    """Generate exactly three ads for a FreshRequest or VariantRequest.

    Scrapes the page when the request carries a url, builds the prompt for the
    request's mode, calls the completion API once and normalizes the answer.
    """
    ensure_api_key()

    heading = description = None
    if gen_request.url:
        scraped = scrape_product_page(gen_request.url)
        heading, description = scraped.heading, scraped.description

    is_variant = isinstance(gen_request, VariantRequest)
    prompt = build_prompt(
        gen_request.url or "",
        heading,
        description,
        custom_prompt=None if is_variant else gen_request.custom_prompt,
        variant_of=gen_request.base if is_variant else None,
        language=gen_request.language,
    )

    raw = request_completion(
        build_system_prompt(gen_request.language),
        prompt,
        "ad_list",
        AD_LIST_SCHEMA,
    )
    ads = normalize_ads(raw, limit=AD_COUNT, minimum=AD_COUNT)
    logger.info("Generated %d ads variant=%s language=%s", len(ads), is_variant, gen_request.language)

    return GenerationResult(
        url=gen_request.url,
        heading=heading,
        description=description,
        variant=is_variant,
        ads=ads,
    )


def translate_ads(ads, target_language):
    """Translate ads into target_language; any non-zero count is a success."""
    ensure_api_key()

    items = [ad if isinstance(ad, AdItem) else AdItem.from_raw(ad) for ad in ads]
    raw = request_completion(
        build_system_prompt(),
        build_translation_prompt(items, target_language),
        "ad_list_translation",
        AD_TRANSLATION_SCHEMA,
    )
    try:
        translated = normalize_ads(raw, limit=None, minimum=1)
    except InsufficientAdsError as e:
        raise AdParseError(raw) from e

    logger.info("Translated %d/%d ads to %s", len(translated), len(items), target_language)
    return translated
