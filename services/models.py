# services/models.py

from typing import Any, List, Optional, Union

from pydantic import BaseModel

from services.errors import RequestValidationError


class AdItem(BaseModel):
    title: str
    description: str
    cta: str

    @classmethod
    def from_raw(cls, item: Any) -> "AdItem":
        """Coerce a loosely-typed model item into trimmed strings."""
        if not isinstance(item, dict):
            item = {}
        return cls(
            title=str(item.get("title") or "").strip(),
            description=str(item.get("description") or "").strip(),
            cta=str(item.get("cta") or "").strip(),
        )

    def is_complete(self) -> bool:
        return bool(self.title and self.description and self.cta)

    def to_dict(self) -> dict:
        return {"title": self.title, "description": self.description, "cta": self.cta}

    def as_text(self) -> str:
        return f"{self.title}\n\n{self.description}\n\nCTA: {self.cta}"


class ScrapeResult(BaseModel):
    heading: Optional[str] = None
    description: Optional[str] = None


class FreshRequest(BaseModel):
    url: str
    language: str
    custom_prompt: Optional[str] = None


class VariantRequest(BaseModel):
    base: AdItem
    language: str
    # Scraped for source metadata only; the variation prompt ignores page context.
    url: Optional[str] = None


GenerationRequest = Union[FreshRequest, VariantRequest]


class GenerationResult(BaseModel):
    url: Optional[str] = None
    heading: Optional[str] = None
    description: Optional[str] = None
    variant: bool = False
    ads: List[AdItem] = []

    def to_dict(self) -> dict:
        return {
            "source": {
                "url": self.url,
                "heading": self.heading,
                "description": self.description,
                "variant": self.variant,
            },
            "ads": [ad.to_dict() for ad in self.ads],
        }


def _clean(value) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return value.strip() or None


def parse_generation_request(body, default_language: str) -> GenerationRequest:
    """Turn a /generate JSON body into a FreshRequest or a VariantRequest."""
    if not isinstance(body, dict):
        raise RequestValidationError("Request body must be a JSON object.")

    url = _clean(body.get("url"))
    variant_of = body.get("variantOf")
    language = _clean(body.get("language")) or default_language

    if not url and not variant_of:
        raise RequestValidationError("Request must contain 'url' or 'variantOf'.")

    if variant_of:
        if not isinstance(variant_of, dict):
            raise RequestValidationError("'variantOf' must be an object with title, description and cta.")
        return VariantRequest(base=AdItem.from_raw(variant_of), language=language, url=url)

    custom_prompt = body.get("customPrompt")
    if not isinstance(custom_prompt, str):
        custom_prompt = None
    return FreshRequest(url=url, language=language, custom_prompt=custom_prompt)
