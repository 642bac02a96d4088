"""Export endpoints: download a chat message as a file."""
from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from core.models.message import ExportRequest
from core.models.response import APIResponse, ExportFormats
from core.services.errors import ErrorHandler
from core.services.export import available_exporters, get_exporter
from core.utils.logger import logger

router = APIRouter()


@router.get("", response_model=APIResponse)
async def list_formats():
    """List the export formats this service can produce."""
    formats = ExportFormats(formats=available_exporters())
    return APIResponse(success=True, message="Available export formats", data=formats.model_dump())


@router.get("/health")
async def exports_health():
    """Health check for the export service."""
    return {"status": "healthy", "service": "exports"}


@router.post("/{export_format}")
async def export_message(export_format: str, request: ExportRequest):
    """Export a question and its canonical response in the requested format."""
    try:
        exporter = get_exporter(export_format)
    except ValueError as e:
        logger.warning(f"Rejected export request: {str(e)}")
        raise HTTPException(status_code=404, detail=str(e))

    try:
        content = exporter.export(request.to_message())
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=ErrorHandler.handle_export_error(e, exporter.name)
        )

    logger.info(f"Exported message as {exporter.name} ({len(content)} bytes)")
    return Response(
        content=content,
        media_type=exporter.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exporter.filename()}"'}
    )
