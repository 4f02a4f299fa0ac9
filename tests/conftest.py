import json
import random
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from austin_weird.generator.main_logic import ContentGenerator


def make_openai_client(text=None, text_error=None, image_url=None, image_error=None):
    """Fake OpenAI client exposing chat.completions.create and images.generate."""
    client = MagicMock()

    if text_error is not None:
        client.chat.completions.create.side_effect = text_error
    else:
        message = SimpleNamespace(content=text)
        client.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=message)]
        )

    if image_error is not None:
        client.images.generate.side_effect = image_error
    else:
        data = [SimpleNamespace(url=image_url)] if image_url is not None else []
        client.images.generate.return_value = SimpleNamespace(data=data)

    return client


@pytest.fixture
def live_content():
    return {
        'bandName': 'The Bat Bridge Bandits',
        'startupPitch': 'Uber for breakfast tacos, delivered by scooter.',
        'tacoRecipe': 'Smoked brisket, queso, and pickled jalapeños on a flour tortilla.',
        'protestSign': 'Keep Austin Weird, Ban Valet Parking!',
    }


@pytest.fixture
def live_json(live_content):
    return json.dumps(live_content)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def fallback_generator(rng):
    return ContentGenerator(api_key=None, rng=rng)
