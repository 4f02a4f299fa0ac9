"""
OpenAI client wrapper.

Two calls are made per live request:

  chat completions  → the four Austin items as a JSON string
  images            → one square protest-sign image, returned as a URL

The client is created from an explicit API key. A missing or placeholder
key is not an error: callers get None back and run in fallback-only mode.
"""
import logging

from openai import OpenAI

from austin_weird import config

logger = logging.getLogger(__name__)

PLACEHOLDER_KEYS = {'your-key-here', 'sk-your-key-here'}


def key_is_set(api_key: str | None) -> bool:
    return bool(api_key) and api_key.strip() not in PLACEHOLDER_KEYS


def get_client(api_key: str | None) -> OpenAI | None:
    """Build an OpenAI client, or return None when no usable key is given."""
    if not key_is_set(api_key):
        return None
    return OpenAI(api_key=api_key)


def generate(
    client: OpenAI,
    messages: list[dict],
    max_tokens: int = 1000,
    temperature: float = 0.9,
    model: str | None = None,
) -> str:
    """
    Run one non-streaming chat completion and return the message text.

    Raises whatever the SDK raises on transport/API errors, and ValueError
    when the model returns no content.
    """
    completion = client.chat.completions.create(
        model=model or config.OPENAI_TEXT_MODEL,
        messages=messages,
        temperature=temperature,
        max_tokens=max_tokens,
    )
    text = completion.choices[0].message.content if completion.choices else None
    if not text:
        raise ValueError('No response from OpenAI')

    logger.debug('OpenAI response: %d chars', len(text))
    return text


def generate_image(client: OpenAI, prompt: str, model: str | None = None) -> str | None:
    """
    Request a single 1024x1024 image and return the URL of the first result.

    Returns None if the response carries no URL. API errors propagate.
    """
    response = client.images.generate(
        model=model or config.OPENAI_IMAGE_MODEL,
        prompt=prompt,
        n=1,
        size='1024x1024',
        quality='standard',
        style='vivid',
    )
    if not response.data:
        return None
    return response.data[0].url or None
