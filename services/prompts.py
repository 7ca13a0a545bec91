"""
Prompt templates for ad copy generation and translation.

Three generation modes, checked in this order:
1. variation of an existing ad (CTA kept verbatim),
2. custom instruction followed by the shared style guidelines,
3. the default copywriter instruction followed by the shared style guidelines.
"""

import json

AD_COUNT = 3

_AD_ITEM_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "title": {"type": "string"},
        "description": {"type": "string"},
        "cta": {"type": "string"},
    },
    "required": ["title", "description", "cta"],
}

AD_LIST_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "ads": {
            "type": "array",
            "minItems": AD_COUNT,
            "maxItems": AD_COUNT,
            "items": _AD_ITEM_SCHEMA,
        }
    },
    "required": ["ads"],
}

AD_TRANSLATION_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "ads": {
            "type": "array",
            "items": _AD_ITEM_SCHEMA,
        }
    },
    "required": ["ads"],
}

COPYWRITER_INTRO = "You are a performance Facebook ads copywriter."


def build_system_prompt(language=None):
    """System message: strict JSON, optionally pinned to one language."""
    prompt = "You output strictly the requested JSON and nothing else."
    if language:
        prompt += f" Respond ONLY in {language}. Do not use any other language."
    return prompt


def build_shared_guidelines(url, heading, description, language):
    return f"""
Context:
- Product URL: {url or ""}
- Page title (h1): {heading or ""}
- Meta description: {description or ""}

Style guidelines (match these exactly):
- Catchy title with an emoji at the start (e.g., ✨, ☀️, 🌧️, ⚡)
- Description must be short, scannable bullet-like lines with emojis
- 3-6 lines in the description, no URLs and no CTA inside the description

Rules:
- title: max 9 words, start with an emoji
- description: 3-6 short lines, each line starts with an emoji or a short phrase
- cta: 1-5 words; pick a CTA that BEST fits the page intent (infer from URL, h1, meta). It may include a leading emoji and/or a trailing down arrow ("👇").
- e-commerce product, cart or checkout page: use "Buy now" or "Order now"
- informational landing page or blog: use "Learn more"
- signup or registration page: use "Sign up"
- contact, services or quote page: use "Contact us" or "Request a quote"
IMPORTANT: All text (title, description, CTA) MUST be written in {language}. Do not use any other language. Avoid untranslated words.
Each of the {AD_COUNT} ads may use a different CTA, but it must always match the page intent.

Return a JSON object with key "ads" whose value is an array of {AD_COUNT} items. Each item must include keys: title, description, cta. Example:
{{"ads":[
  {{"title":"...","description":"...","cta":"<CTA matching the page intent>"}},
  {{"title":"...","description":"...","cta":"<CTA matching the page intent>"}},
  {{"title":"...","description":"...","cta":"<CTA matching the page intent>"}}
]}}"""


def build_variation_prompt(variant_of, language):
    example = json.dumps({"ads": [{"title": "...", "description": "...", "cta": variant_of.cta}]}, ensure_ascii=False)
    return f"""{COPYWRITER_INTRO}
Generate EXACTLY {AD_COUNT} similar VARIATIONS to the given base ad, keeping the same CTA. Language: {language}.

Base ad:
{variant_of.as_text()}

Guidelines:
- Keep the core benefits and style (emoji title + bullet-like short lines)
- Avoid repeating the exact same phrases; rephrase creatively
- Keep CTA identical to the base ad's CTA: {variant_of.cta}
- Respect the previous style rules (max 9 words in the title, 3-6 short lines, no URLs)
- All text MUST be written in {language}

Return a JSON object with key "ads" whose value is an array of {AD_COUNT} items with keys: title, description, cta. Example:
{example}"""


def build_prompt(url, heading=None, description=None, custom_prompt=None, variant_of=None, language="Slovenian"):
    """Build the user prompt for one generation request."""
    if variant_of is not None:
        return build_variation_prompt(variant_of, language)

    guidelines = build_shared_guidelines(url, heading, description, language)

    if custom_prompt and custom_prompt.strip():
        return (
            f"{custom_prompt}\n\n"
            f"Generate EXACTLY {AD_COUNT} distinct Facebook ad variations in {language}. Output strictly JSON.\n"
            f"{guidelines}"
        )

    return (
        f"{COPYWRITER_INTRO}\n"
        f"Generate EXACTLY {AD_COUNT} distinct Facebook ad variations.\n"
        f"Language: {language}. Be persuasive, concise, and compliant. Output JSON only.\n\n"
        f"{guidelines}"
    )


def build_translation_prompt(ads, target_language):
    """Ask for every ad to be translated, tone and emojis preserved."""
    payload = json.dumps([ad.to_dict() for ad in ads], ensure_ascii=False, indent=2)
    return (
        f"Translate each ad to {target_language}. Keep the persuasive style and emojis. "
        f"Keep CTA short and natural for {target_language}. "
        'Return JSON with key "ads" as an array of {title, description, cta}.\n\n'
        f"Ads to translate:\n{payload}"
    )
