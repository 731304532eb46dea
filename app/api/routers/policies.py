from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas.error import ErrorResponse
from app.schemas.policy import LineOfBusinessStats, PolicySearchRequest, PolicySearchResponse
from app.services.policy import get_line_of_business_stats, search_policies

router = APIRouter(tags=["policies"])


@router.post(
    "/search",
    response_model=PolicySearchResponse,
    responses={500: {"model": ErrorResponse}},
)
def search(
    search_request: PolicySearchRequest,
    db: Session = Depends(get_db),
):
    """
    Search policies.

    Filters and sorts use the UI grid descriptors; unrecognized descriptors
    are ignored. ``total`` counts every match regardless of ``from``/``size``.
    """
    return search_policies(
        db,
        filters=search_request.filter_entries,
        sorts=search_request.sort_entries,
        offset=search_request.offset,
        limit=search_request.size,
    )


@router.get(
    "/line-of-business-stats",
    response_model=LineOfBusinessStats,
    responses={500: {"model": ErrorResponse}},
)
def line_of_business_stats(db: Session = Depends(get_db)):
    """
    Get policy counts per status and the distinct lines of business.
    """
    return get_line_of_business_stats(db)
