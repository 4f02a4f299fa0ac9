"""
Generator core logic. Framework-agnostic.

One call to ContentGenerator.generate() yields one GeneratedContent. The
call never raises: a missing key, unparseable model output, or any upstream
failure degrades to a random entry from FALLBACK_SET.
"""
import logging
import random
import time

from austin_weird import llm_client
from austin_weird.metrics import (
    generation_requests, generation_fallbacks, generation_latency, image_errors,
)
from austin_weird.generator.content import FALLBACK_SET, GeneratedContent
from austin_weird.generator.normalize import parse_content_response, normalize_fields
from austin_weird.generator.prompts import build_content_messages, build_protest_sign_prompt

logger = logging.getLogger(__name__)

TEMPERATURE = 0.9
MAX_TOKENS = 1000


class ContentGenerator:
    """
    Live mode when built with a usable API key (or an injected client),
    fallback-only mode otherwise.
    """

    def __init__(self, api_key: str | None = None, client=None, rng: random.Random | None = None):
        self.client = client if client is not None else llm_client.get_client(api_key)
        self.rng = rng or random

    @property
    def live(self) -> bool:
        return self.client is not None

    def pick_fallback(self) -> GeneratedContent:
        return FALLBACK_SET[self.rng.randrange(len(FALLBACK_SET))]

    def _fallback(self, reason: str) -> GeneratedContent:
        generation_fallbacks.labels(reason=reason).inc()
        generation_requests.labels(source='fallback').inc()
        return self.pick_fallback()

    def generate_image(self, slogan: str) -> str | None:
        """Protest-sign image URL for the slogan, or None on any failure."""
        try:
            return llm_client.generate_image(self.client, build_protest_sign_prompt(slogan))
        except Exception as e:
            image_errors.inc()
            logger.error(f"Error generating protest sign image: {e}")
            return None

    def _generate_live(self) -> GeneratedContent:
        raw = llm_client.generate(
            self.client,
            build_content_messages(),
            max_tokens=MAX_TOKENS,
            temperature=TEMPERATURE,
        )

        data = parse_content_response(raw)
        if data is None:
            return self._fallback('parse_error')

        fields = normalize_fields(data)
        image_url = self.generate_image(fields['protestSign'])
        if image_url is None:
            logger.info("No protest sign image, returning text only")

        generation_requests.labels(source='live').inc()
        return GeneratedContent(
            band_name=fields['bandName'],
            startup_pitch=fields['startupPitch'],
            taco_recipe=fields['tacoRecipe'],
            protest_sign=fields['protestSign'],
            protest_sign_image=image_url,
        )

    def generate(self) -> GeneratedContent:
        if not self.live:
            return self._fallback('no_credential')

        start = time.time()
        try:
            content = self._generate_live()
        except Exception:
            logger.exception("Error generating content, using fallback response")
            return self._fallback('api_error')

        elapsed = time.time() - start
        generation_latency.observe(elapsed)
        logger.info(f"Generated content in {elapsed:.1f}s")
        return content
