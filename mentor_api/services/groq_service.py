import logging
from typing import List, Optional

import httpx

from mentor_api.core.config import Settings, settings as default_settings
from mentor_api.core.errors import ConfigurationError, UpstreamError
from mentor_api.schemas.mentor import ChatMessage

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
    "GROQ_API_KEY is not set. Locally, set it in .env. "
    "In deployment, set it in the service's environment variables."
)


def require_api_key(settings: Settings) -> str:
    api_key = settings.GROQ_API_KEY.strip()
    if not api_key:
        logger.error("Missing GROQ_API_KEY env var")
        raise ConfigurationError(MISSING_KEY_MESSAGE)
    return api_key


def build_payload(system_prompt: str, messages: List[ChatMessage], settings: Settings) -> dict:
    return {
        "model": settings.GROQ_MODEL,
        "messages": [{"role": "system", "content": system_prompt}]
        + [{"role": m.role, "content": m.content} for m in messages],
        "temperature": settings.TEMPERATURE,
        "max_tokens": settings.MAX_OUTPUT_TOKENS,
    }


def _error_message(response: httpx.Response) -> str:
    # Groq returns {"error": {"message": ...}} like OpenAI
    try:
        data = response.json()
    except ValueError:
        return response.text or f"Provider returned HTTP {response.status_code}"
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    if isinstance(error, str) and error:
        return error
    return response.text or f"Provider returned HTTP {response.status_code}"


def _extract_text(data) -> str:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        raise UpstreamError("Provider response did not contain any generated text")
    return content or ""


async def generate_text(
    system_prompt: str,
    messages: List[ChatMessage],
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """
    Send the system prompt plus chat history to Groq's OpenAI-compatible
    chat completions endpoint and return the generated text.

    One request per call; no retry, no caching.

    Raises:
        ConfigurationError: GROQ_API_KEY is empty.
        UpstreamError: transport failure, non-2xx status or malformed body.
    """
    settings = settings or default_settings
    api_key = require_api_key(settings)

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json"
    }
    payload = build_payload(system_prompt, messages, settings)
    url = f"{settings.GROQ_API_URL.rstrip('/')}/chat/completions"

    async with httpx.AsyncClient(timeout=settings.REQUEST_TIMEOUT, transport=transport) as client:
        try:
            response = await client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error("Request to Groq failed: %s", e)
            raise UpstreamError(str(e))

    if response.status_code != 200:
        message = _error_message(response)
        logger.error("Groq returned %s: %s", response.status_code, message)
        raise UpstreamError(message)

    try:
        data = response.json()
    except ValueError:
        logger.error("Groq returned a non-JSON body")
        raise UpstreamError("Provider returned an invalid response")

    return _extract_text(data)
