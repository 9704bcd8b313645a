import logging
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from langsmith import traceable

from src.api.schemas import (
    CategoryInfoResponse,
    FormatValidateRequest,
    FormatValidateResponse,
    GuidanceRequest,
    GuidanceResponse,
    SelectionValidationResponse,
)
from src.api.services import CulturalGuide, MenuService, SelectionError, get_cultural_guide

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["guidance"])


def get_menu_service() -> MenuService:
    return MenuService()


@router.get("/categories")
async def list_categories(
    menu: Annotated[MenuService, Depends(get_menu_service)],
):
    """List the dropdown categories."""
    return {"categories": menu.categories()}


@router.get("/categories/{category}", response_model=CategoryInfoResponse)
async def category_info(
    category: str,
    menu: Annotated[MenuService, Depends(get_menu_service)],
):
    """Describe a category, its menu and the preferences it uses."""
    try:
        return menu.category_info(category)
    except SelectionError as e:
        raise HTTPException(status_code=400, detail=e.problems)


@router.get("/categories/{category}/subcategories")
async def list_subcategories(
    category: str,
    menu: Annotated[MenuService, Depends(get_menu_service)],
):
    """List the dropdown options of a category."""
    try:
        return {"category": category, "subcategories": menu.subcategories(category)}
    except SelectionError as e:
        raise HTTPException(status_code=400, detail=e.problems)


@router.post("/guidance", response_model=GuidanceResponse)
@traceable(name="guidance_endpoint")
def get_guidance(
    body: GuidanceRequest,
    request: Request,
    guide: Annotated[CulturalGuide, Depends(get_cultural_guide)],
):
    """
    Get cultural guidance for a dropdown selection.

    Invalid categories, selections or preferences return 400 with the list of
    problems. Unknown terms, cities, festivals and moods are not errors, the
    response explains what is available instead.
    """
    request_id = getattr(request.state, "request_id", None) or str(uuid.uuid4())

    try:
        text = guide.guidance(body.category, body.selection, body.preferences, request_id=request_id)
    except SelectionError as e:
        logger.info(f"[{request_id}] Invalid selection: {e.problems}")
        raise HTTPException(status_code=400, detail=e.problems)

    return GuidanceResponse(
        request_id=request_id,
        response=text,
        category=body.category,
        selection=body.selection,
        preferences=body.preferences,
    )


@router.post("/validate", response_model=SelectionValidationResponse)
async def validate_selection(
    body: GuidanceRequest,
    menu: Annotated[MenuService, Depends(get_menu_service)],
):
    """Validate a selection without generating guidance."""
    errors = menu.validate_selection(body.category, body.selection, body.preferences)
    warnings = menu.selection_warnings(body.category, body.selection, body.preferences)
    return SelectionValidationResponse(is_valid=not errors, errors=errors, warnings=warnings)


@router.post("/format/validate", response_model=FormatValidateResponse)
async def validate_format(
    body: FormatValidateRequest,
    guide: Annotated[CulturalGuide, Depends(get_cultural_guide)],
):
    """Check a text against the output policy."""
    return guide.validate_response_quality(body.content)
