"""Home page route."""

from fastapi import APIRouter, Request
from fastapi.responses import Response

from api.templating import session_username, templates
from core.dependencies import CategoryManagerDep
from utils.converters import model_to_category

router = APIRouter(tags=["Home"])


@router.get("/", summary="Home page")
def home(request: Request, category_manager: CategoryManagerDep) -> Response:
    categories = [model_to_category(m) for m in category_manager.list_categories()]
    return templates.TemplateResponse(
        request,
        "home.html",
        {"current_user": session_username(request), "categories": categories},
    )
