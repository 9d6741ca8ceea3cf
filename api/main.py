import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from accounts import router as accounts_router
from core.config import Settings, get_settings
from core.db import Database
from core.errors import ApiError, InternalError
from core.logging import configure_logging
from events import router as events_router
from images import router as images_router
from persons import router as persons_router
from tagging import router as tagging_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # The one fatal failure: no store, no service.
    try:
        app.state.db = await Database.connect(settings)
    except Exception:
        logger.critical("failed to connect db host=%s port=%s", settings.db_host, settings.db_port)
        raise
    try:
        yield
    finally:
        await app.state.db.close()


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(p) for p in error.get("loc", ()))
        parts.append(f"{loc}: {error.get('msg', 'invalid')}")
    return "bad request: " + "; ".join(parts)


async def api_error_handler(request: Request, exc: ApiError) -> Response:
    if isinstance(exc, InternalError):
        logger.error("internal_error method=%s path=%s detail=%s", request.method, request.url.path, exc.detail)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return PlainTextResponse(exc.detail, status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
    message = _validation_message(exc)
    logger.info("bad_request method=%s path=%s detail=%s", request.method, request.url.path, message)
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


def _mount_frontend(app: FastAPI, frontend_dir: Path) -> None:
    index_html = frontend_dir / "index.html"
    assets_dir = frontend_dir / "assets"
    if assets_dir.is_dir():
        app.mount("/assets", StaticFiles(directory=assets_dir), name="assets")

    async def index() -> Response:
        if not index_html.is_file():
            return PlainTextResponse("not found: index", status_code=status.HTTP_404_NOT_FOUND)
        return FileResponse(index_html)

    app.add_api_route("/", index, methods=["GET"], include_in_schema=False)
    app.add_api_route("/home", index, methods=["GET"], include_in_schema=False)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="event-tagging-api", lifespan=lifespan)
    app.state.settings = settings

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "request_completed method=%s path=%s status=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response

    app.include_router(accounts_router.router, tags=["accounts"])
    app.include_router(events_router.router, tags=["events"])
    app.include_router(tagging_router.router, tags=["tagging"])
    app.include_router(persons_router.router, tags=["persons"])
    app.include_router(images_router.router, tags=["images"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/api/test", response_class=PlainTextResponse)
    def hello() -> str:
        return "Hello, World!"

    app.mount("/images", StaticFiles(directory=settings.images_dir, check_dir=False), name="images")
    _mount_frontend(app, Path(settings.frontend_dir))
    return app


app = create_app()
