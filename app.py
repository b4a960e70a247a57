import sys

from loguru import logger

from neuronpad.api import create_app
from neuronpad.config import settings
from neuronpad.transform.gemini import GeminiGenerator

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info(f"Initializing NeuronPad text service with Gemini model {settings.gemini_model}")
generator = GeminiGenerator(
    api_key=settings.gemini_api_key,
    model=settings.gemini_model,
    base_url=settings.gemini_base_url,
)
app = create_app(generator=generator)
