"""Endpoints that normalize backend replies and render them for display."""
from fastapi import APIRouter, HTTPException, Request
from core.models.answer import AnswerResponse
from core.models.response import APIResponse, NormalizedAnswer
from core.services.errors import ErrorHandler
from core.services.formatting import DisplayRenderer, icon_names
from core.services.normalization import response_parser
from core.utils.logger import logger

router = APIRouter()
display_renderer = DisplayRenderer()


@router.post("/normalize", response_model=APIResponse)
async def normalize_response(request: Request):
    """Normalize a raw backend reply body.

    The body is read as-is; its Content-Type decides whether it is decoded as
    JSON or treated as text. The result carries the canonical response and
    its display HTML.
    """
    try:
        body = await request.body()
        content_type = request.headers.get("content-type")
        logger.info(f"Normalizing reply ({len(body)} bytes, content-type={content_type})")

        response = response_parser.parse_body(body, content_type)
        html = ErrorHandler.safe_execute(
            lambda: display_renderer.render(response),
            error_type="render_error"
        )
        normalized = NormalizedAnswer(response=response, html=html)
        return APIResponse(
            success=True,
            message="Response normalized",
            data=normalized.model_dump(mode="json")
        )
    except Exception as e:
        logger.error(f"Error normalizing response: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error normalizing response: {str(e)}"
        )


@router.post("/render", response_model=APIResponse)
async def render_response(response: AnswerResponse):
    """Render an already-canonical response to display HTML."""
    try:
        html = display_renderer.render(response)
        return APIResponse(success=True, message="Response rendered", data={"html": html})
    except Exception as e:
        logger.error(f"Error rendering response: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error rendering response: {str(e)}"
        )


@router.get("/icons", response_model=APIResponse)
async def list_icons():
    """List icon names usable in [ICON:name] tokens."""
    return APIResponse(success=True, message="Available icons", data={"icons": icon_names()})


@router.get("/health")
async def responses_health():
    """Health check for the normalization service."""
    return {"status": "healthy", "service": "responses"}
