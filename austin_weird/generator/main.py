"""
Generator service — FastAPI app.
Runs on port 5000.

Start with:
    uvicorn austin_weird.generator.main:app --port 5000 --reload
"""
import logging
from fastapi import FastAPI, Request
from pydantic import BaseModel
from prometheus_client import make_asgi_app

from austin_weird import config
from austin_weird.generator.main_logic import ContentGenerator

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title='Keep Austin Weird Generator', version='0.1.0')
app.mount('/metrics', make_asgi_app())

app.state.generator = ContentGenerator(api_key=config.OPENAI_API_KEY)
if not app.state.generator.live:
    logger.warning('OPENAI_API_KEY is not set. Using fallback responses.')


class GenerateResponse(BaseModel):
    bandName: str
    startupPitch: str
    tacoRecipe: str
    protestSign: str
    protestSignImage: str | None = None


@app.get('/health')
def health(request: Request):
    mode = 'live' if request.app.state.generator.live else 'fallback'
    return {'status': 'ok', 'service': 'generator', 'mode': mode}


@app.post('/api/generate', response_model=GenerateResponse, response_model_exclude_none=True)
@app.post('/generate', response_model=GenerateResponse, response_model_exclude_none=True,
          include_in_schema=False)
def generate(request: Request):
    """
    Generate one set of Austin content. Any request body is ignored.
    Always 200: failures fall back to pre-written content.
    """
    content = request.app.state.generator.generate()
    return GenerateResponse(**content.to_dict())
