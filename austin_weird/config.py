import os
from dotenv import load_dotenv

load_dotenv()

# LLM — OpenAI (text + images)
# Unset or placeholder key means fallback-only mode.
OPENAI_API_KEY = os.getenv('OPENAI_API_KEY')
OPENAI_TEXT_MODEL = os.getenv('OPENAI_TEXT_MODEL', 'gpt-4')
OPENAI_IMAGE_MODEL = os.getenv('OPENAI_IMAGE_MODEL', 'dall-e-3')

# Generator service, as seen by the trigger client
GENERATOR_URL = os.getenv('GENERATOR_URL', 'http://localhost:5000')

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
