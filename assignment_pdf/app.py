"""
FastAPI application for assignment export.

Provides REST API endpoints for PDF export (download and base64 for share
sheets), text normalisation, HTML and plain-text submission rendering and
answer generation, with request logging and error handling.

License: MIT
"""

import base64
import logging
import time
from typing import Any, Dict, Optional, Type, TypeVar

from fastapi import Body, Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel, ValidationError

from assignment_pdf.config import Settings
from assignment_pdf.errors import GenerationError, PDFExportError
from assignment_pdf.generation import FallbackGenerator, build_generator
from assignment_pdf.metrics import FontMetrics
from assignment_pdf.models import (
    AssignmentSubmission, ExportRequest, GenerateRequest, NormalizeRequest
)
from assignment_pdf.normalizer import normalize
from assignment_pdf.renderer import build_assignment_body, compose_document, export_filename
from assignment_pdf.templates import format_submission_text, render_submission_html

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse(model: Type[ModelT], data: Any) -> ModelT:
    """Validate a request body, mapping validation errors to 400."""
    if not isinstance(data, dict):
        logger.error(f"Validation error: expected a JSON object, got {type(data).__name__}")
        raise HTTPException(status_code=400, detail="Validation error: request body must be a JSON object")
    try:
        return model(**data)
    except ValidationError as e:
        logger.error(f"Validation error: {str(e)}")
        raise HTTPException(status_code=400, detail=f"Validation error: {str(e)}")


def get_metrics(request: Request) -> FontMetrics:
    return request.app.state.metrics


def get_generator(request: Request) -> Optional[FallbackGenerator]:
    return request.app.state.generator


def _render(export: ExportRequest, metrics: FontMetrics):
    """Compose the PDF for an export request and time it."""
    if export.content is not None:
        body = export.content
    else:
        body = build_assignment_body(export.title, export.question, export.answer)

    options = export.options
    if options.title is None and export.title:
        options = options.model_copy(update={"title": export.title})

    start_time = time.time()
    try:
        pdf_bytes = compose_document(body, export.header, options, metrics)
    except PDFExportError as e:
        raise HTTPException(status_code=500, detail=str(e))
    render_time = time.time() - start_time

    logger.info(f"Exported '{export.title}' ({len(pdf_bytes)} bytes) in {render_time:.3f}s")
    return pdf_bytes, render_time


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the service.

    Args:
        settings: Runtime settings; read from the environment when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = FastAPI(
        title="Assignment PDF Export API",
        version="1.0.0",
        description="Paginated PDF export and answer drafting for student assignments",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json"
    )

    app.state.settings = settings
    app.state.metrics = FontMetrics(settings.font_files)
    try:
        app.state.generator = build_generator(settings)
    except GenerationError as e:
        logger.warning(f"Answer generation disabled: {e}")
        app.state.generator = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all requests with timing information."""
        start_time = time.time()

        response = await call_next(request)

        duration = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} "
            f"completed in {duration:.3f}s with status {response.status_code}"
        )

        return response

    @app.get("/health")
    def health_check() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/export")
    def export_pdf(raw_body: Any = Body(...),
                   metrics: FontMetrics = Depends(get_metrics)) -> Response:
        """
        Export an assignment as a PDF download.

        Returns:
            PDF file as binary response named after the assignment title
        """
        export = _parse(ExportRequest, raw_body)
        pdf_bytes, render_time = _render(export, metrics)

        headers = {
            "Content-Disposition": f'attachment; filename="{export_filename(export.title)}"',
            "X-Render-Time": f"{render_time:.3f}",
        }
        return Response(content=pdf_bytes, media_type="application/pdf", headers=headers)

    @app.post("/export-base64")
    def export_pdf_base64(raw_body: Any = Body(...),
                          metrics: FontMetrics = Depends(get_metrics)) -> Dict[str, Any]:
        """
        Export an assignment as base64-encoded JSON.

        Useful for mobile clients that hand the file to the OS share sheet.
        """
        export = _parse(ExportRequest, raw_body)
        pdf_bytes, render_time = _render(export, metrics)

        return {
            "success": True,
            "pdf_base64": base64.b64encode(pdf_bytes).decode("utf-8"),
            "filename": export_filename(export.title),
            "size_bytes": len(pdf_bytes),
            "render_time_seconds": round(render_time, 3),
        }

    @app.post("/normalize")
    def normalize_text(raw_body: Any = Body(...)) -> Dict[str, str]:
        payload = _parse(NormalizeRequest, raw_body)
        return {"text": normalize(payload.text)}

    @app.post("/render-html", response_class=HTMLResponse)
    def render_html(raw_body: Any = Body(...)) -> HTMLResponse:
        submission = _parse(AssignmentSubmission, raw_body)
        return HTMLResponse(content=render_submission_html(submission))

    @app.post("/render-text", response_class=PlainTextResponse)
    def render_text(raw_body: Any = Body(...)) -> PlainTextResponse:
        """Plain-text submission, for sharing as a message or note."""
        submission = _parse(AssignmentSubmission, raw_body)
        return PlainTextResponse(content=format_submission_text(submission))

    @app.post("/generate")
    def generate_answer(raw_body: Any = Body(...),
                        generator: Optional[FallbackGenerator] = Depends(get_generator)) -> Dict[str, str]:
        """
        Draft an answer with the configured providers.

        Raises:
            HTTPException: 503 without providers, 502 when every provider fails
        """
        payload = _parse(GenerateRequest, raw_body)
        if generator is None:
            raise HTTPException(status_code=503, detail="No text-generation provider is configured")

        try:
            result = generator.generate_response(payload.prompt)
        except GenerationError as e:
            logger.error(f"Generation error: {str(e)}")
            raise HTTPException(status_code=502, detail=str(e))

        return {
            "provider": result.provider,
            "prompt": result.prompt,
            "response": result.text,
            "formatted": normalize(result.text),
        }

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected errors."""
        logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "detail": str(exc)}
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
