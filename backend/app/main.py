from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse
from starlette import status
from app.api.middleware.method_override import MethodOverrideMiddleware
from app.api.v1 import health, people
from app.core.config import settings
from app.core.db import init_db
from app.core.errors import PersonNotFoundError
from app.core.logging_config import configure_logging, get_logger
from app.core.templating import templates

logger = get_logger(__name__)


async def person_not_found_handler(request: Request, exc: PersonNotFoundError):
    logger.warning(f"{request.method} {request.url.path}: {exc}")
    return templates.TemplateResponse(
        request,
        "people/not_found.html",
        {"person_id": exc.person_id},
        status_code=status.HTTP_404_NOT_FOUND,
    )


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title=settings.PROJECT_NAME)
    app.add_middleware(MethodOverrideMiddleware)
    app.add_exception_handler(PersonNotFoundError, person_not_found_handler)

    @app.on_event("startup")
    def on_startup():
        init_db()

    @app.get("/", include_in_schema=False)
    def read_root():
        return RedirectResponse("/people", status_code=status.HTTP_303_SEE_OTHER)

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(people.router, prefix="/people", tags=["people"])
    return app


app = create_app()
