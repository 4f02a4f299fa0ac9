"""
Client trigger for the generator service.

Drives one request/response cycle at a time:

  idle → generating → result
                    → error

While generating, the trigger is disabled and further calls are ignored.
"""
import logging
from enum import Enum

import requests

logger = logging.getLogger(__name__)

GENERATE_PATH = '/api/generate'

FAILURE_MESSAGE = 'Failed to generate content. Please try again.'
NETWORK_ERROR_MESSAGE = 'Network error. Please check your connection and try again.'
CREDENTIAL_HINT = 'Tip: Set up your OpenAI API key in .env for AI-powered generation!'
IMAGE_HINT = 'Set up your OpenAI API key to generate protest sign images!'


class TriggerState(str, Enum):
    IDLE = 'idle'
    GENERATING = 'generating'
    RESULT = 'result'
    ERROR = 'error'


def _error_payload(resp: requests.Response) -> dict:
    try:
        payload = resp.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


class GenerateTrigger:
    def __init__(self, base_url: str, session: requests.Session | None = None,
                 timeout: float | None = None):
        self.url = base_url.rstrip('/') + GENERATE_PATH
        self.session = session or requests.Session()
        self.timeout = timeout
        self.state = TriggerState.IDLE
        self.content: dict | None = None
        self.error: str | None = None

    @property
    def disabled(self) -> bool:
        return self.state == TriggerState.GENERATING

    def generate(self) -> TriggerState:
        """Run one generation cycle and return the resulting state."""
        if self.disabled:
            logger.debug('Generation already in flight, ignoring trigger')
            return self.state

        self.content = None
        self.error = None
        self.state = TriggerState.GENERATING

        try:
            resp = self.session.post(
                self.url,
                headers={'Content-Type': 'application/json'},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Error generating content: {e}")
            self.error = NETWORK_ERROR_MESSAGE
            self.state = TriggerState.ERROR
            return self.state

        if not resp.ok:
            payload = _error_payload(resp)
            logger.error(f"API error {resp.status_code}: {payload}")
            self.error = payload.get('message') or FAILURE_MESSAGE
            self.state = TriggerState.ERROR
            return self.state

        try:
            content = resp.json()
        except ValueError as e:
            logger.error(f"Invalid response body: {e}")
            content = None

        if not isinstance(content, dict):
            logger.error(f"Expected a JSON object, got {type(content).__name__}")
            self.error = FAILURE_MESSAGE
            self.state = TriggerState.ERROR
            return self.state

        self.content = content
        self.state = TriggerState.RESULT
        return self.state

    def render(self) -> str:
        if self.state == TriggerState.GENERATING:
            return 'Generating Austin Weirdness...'

        if self.state == TriggerState.ERROR:
            return f"{self.error}\n{CREDENTIAL_HINT}"

        if self.state == TriggerState.RESULT:
            c = self.content or {}
            image = c.get('protestSignImage') or IMAGE_HINT
            return '\n'.join([
                f"Band Name:     {c.get('bandName', '')}",
                f"Startup Pitch: {c.get('startupPitch', '')}",
                f"Taco Recipe:   {c.get('tacoRecipe', '')}",
                f"Protest Sign:  {c.get('protestSign', '')}",
                f"Sign Image:    {image}",
            ])

        return 'Press generate for Austin Weirdness.'
