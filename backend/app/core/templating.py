from fastapi import Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette import status

from app.core.config import settings
from app.controllers.people import ControllerResult, Redirect

templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)


def template_name(token: str) -> str:
    """map a view token like "people/show" onto its template file"""
    return f"{token.strip('/')}.html"


def to_response(request: Request, result: ControllerResult):
    if isinstance(result, Redirect):
        # 303 so the browser follows up with a GET even after PATCH/DELETE
        return RedirectResponse(result.path, status_code=status.HTTP_303_SEE_OTHER)
    return templates.TemplateResponse(
        request,
        template_name(result.token),
        result.bindings,
        status_code=result.status_code,
    )
