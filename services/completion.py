import logging

import config
from services.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Client initialized lazily
_client = None


def ensure_api_key():
    """Raise ConfigurationError when OPENAI_API_KEY is not set."""
    api_key = config.get_openai_api_key()
    if not api_key:
        raise ConfigurationError("Missing environment variable OPENAI_API_KEY.")
    return api_key


def get_openai_client():
    """Get or create OpenAI client (lazy initialization)."""
    global _client
    api_key = ensure_api_key()
    if _client is None or _client.api_key != api_key:
        from openai import OpenAI
        _client = OpenAI(api_key=api_key)
    return _client


def request_completion(system_prompt: str, user_prompt: str, schema_name: str, schema: dict) -> str:
    """Send one schema-constrained chat completion and return the raw text.

    No retries and no explicit timeout: the SDK transport default applies.
    """
    client = get_openai_client()
    logger.info("Requesting completion model=%s schema=%s", config.OPENAI_MODEL, schema_name)

    response = client.chat.completions.create(
        model=config.OPENAI_MODEL,
        temperature=config.COMPLETION_TEMPERATURE,
        messages=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        response_format={
            "type": "json_schema",
            "json_schema": {"name": schema_name, "schema": schema},
        },
    )

    if not response.choices:
        return ""
    content = response.choices[0].message.content
    return (content or "").strip()
