from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.concurrency import run_in_threadpool

from neuronpad.errors import MissingCredentialError, UpstreamError
from neuronpad.transform.base import ROUTES, TextGenerator, TransformKind


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _create_transform_endpoint(generator: TextGenerator, kind: TransformKind):
    """Create the handler for one text transformation route."""

    async def transform(request: Request) -> JSONResponse:
        try:
            body = await request.json()
        except ValueError:
            body = None

        text = body.get("text") if isinstance(body, dict) else None
        if not text or not isinstance(text, str):
            return _error("Text is required", 400)

        try:
            result = await run_in_threadpool(generator.generate, kind, text)
        except MissingCredentialError as e:
            logger.error(str(e))
            return _error(str(e), 500)
        except UpstreamError as e:
            return _error(str(e), 500)
        except Exception as e:
            logger.error(f"Error in {kind.value}: {str(e)}")
            return _error("Internal server error", 500)

        return JSONResponse({"result": result})

    return transform


def get_endpoints_router(*, generator: TextGenerator) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    for kind in TransformKind:
        router.post(ROUTES[kind])(_create_transform_endpoint(generator, kind))

    return router
