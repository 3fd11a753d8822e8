"""Google Gemini API wrapper with error handling.

Every call is best-effort: failures are logged and surface as ``None`` so that
callers can substitute their own fallback values.
"""

import json
import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def _strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()
    return text


async def generate_json(
    prompt: str,
    system_instruction: str | None = None,
    temperature: float = 0.3,
) -> dict | None:
    """Send a prompt to Gemini and parse the JSON response."""
    client = get_client()
    if client is None:
        return None

    try:
        response = client.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                temperature=temperature,
                max_output_tokens=4096,
                response_mime_type="application/json",
            ),
        )

        data = json.loads(_strip_code_fences(response.text or ""))
        if not isinstance(data, dict):
            logger.error("Gemini returned %s, expected a JSON object", type(data).__name__)
            return None
        return data

    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        return None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None


async def generate_text(
    prompt: str,
    image_bytes: bytes | None = None,
    mime_type: str = "image/jpeg",
    temperature: float = 0.3,
) -> str | None:
    """Plain-text generation, optionally grounded on an image."""
    client = get_client()
    if client is None:
        return None

    contents: list = [prompt]
    if image_bytes:
        contents.insert(0, types.Part.from_bytes(data=image_bytes, mime_type=mime_type))

    try:
        response = client.models.generate_content(
            model=settings.gemini_model,
            contents=contents,
            config=types.GenerateContentConfig(
                temperature=temperature,
                max_output_tokens=1500,
            ),
        )
        text = (response.text or "").strip()
        return text or None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None
