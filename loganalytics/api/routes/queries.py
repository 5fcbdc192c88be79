"""Query resolution endpoints."""

import logging

from fastapi import APIRouter

from loganalytics.api.models import ResolveRequest, ResolveResponse
from loganalytics.config import get_settings
from template_resolver import QueryTemplateResolver

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/queries", tags=["Queries"])


@router.post("/resolve", response_model=ResolveResponse)
def resolve_query(request: ResolveRequest):
    """Expand macros in a query template.

    Per-request column/sentinel overrides fall back to configured settings.
    """
    settings = get_settings()
    resolver = QueryTemplateResolver(
        default_time_column=request.default_time_column or settings.default_time_column,
        select_all_value=request.select_all_value or settings.select_all_value,
    )
    result = resolver.resolve(request.template, request.to_options())

    logger.debug("[RESOLVE] API resolved template (%d chars)", len(request.template))
    return ResolveResponse.from_result(result)
