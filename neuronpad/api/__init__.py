from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from neuronpad.api.endpoints import get_endpoints_router
from neuronpad.transform.base import TextGenerator


def create_app(*, generator: TextGenerator) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI(title="NeuronPad")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router=get_endpoints_router(generator=generator))

    return app
