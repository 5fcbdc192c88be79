"""Macro listing endpoint for query editors."""

from fastapi import APIRouter

from loganalytics.api.models import MacroListResponse
from template_resolver import get_registry

router = APIRouter(prefix="/macros", tags=["Macros"])


@router.get("", response_model=MacroListResponse)
def list_macros():
    """List all macros a template may use."""
    return get_registry().to_api_format()
