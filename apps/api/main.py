"""pdf-content api entrypoint and HTTP route wiring."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pdf_content.application.ports.content_store_port import ContentStorePort
from pdf_content.application.ports.text_extractor_port import TextExtractorPort
from pdf_content.application.services.pdf_content_service import PdfContentService
from pdf_content.application.services.upload_pdf_service import UploadPdfService
from pdf_content.config.settings import Settings, load_settings
from pdf_content.infrastructure.http.error_handlers import register_exception_handlers
from pdf_content.infrastructure.http.pdf_content_router import build_pdf_content_router
from pdf_content.infrastructure.logging import configure_logging
from pdf_content.infrastructure.pdf.text_extractor import PypdfTextExtractor
from pdf_content.infrastructure.store.in_memory_content_store import InMemoryContentStore

API_HOST = "0.0.0.0"
logger = logging.getLogger(__name__)


def create_app(
    *,
    settings: Settings | None = None,
    content_store: ContentStorePort | None = None,
    text_extractor: TextExtractorPort | None = None,
) -> FastAPI:
    """Create FastAPI app for PDF upload and extracted text retrieval."""

    if settings is None:
        settings = load_settings()
    configure_logging(level=settings.log_level)

    if content_store is None:
        content_store = InMemoryContentStore()
    if text_extractor is None:
        text_extractor = PypdfTextExtractor()

    app = FastAPI()
    app.state.content_store = content_store
    register_exception_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(
        build_pdf_content_router(
            upload_service=UploadPdfService(
                text_extractor=text_extractor,
                content_store=content_store,
            ),
            content_service=PdfContentService(content_store=content_store),
        )
    )
    return app


def run_asgi_server(*, host: str = API_HOST, port: int | None = None) -> None:
    """Run the api as a long-lived ASGI process using application factory mode."""

    settings = load_settings()
    configure_logging(level=settings.log_level)
    if port is None:
        port = settings.port

    logger.info("api_server_starting url=http://%s:%s", host, port)
    uvicorn.run(
        "apps.api.main:create_app",
        host=host,
        port=port,
        factory=True,
    )


def main() -> None:
    """Run api runtime process."""

    run_asgi_server()


if __name__ == "__main__":
    main()
