import logging

from sqlalchemy.orm import Session

import app.repositories.policy as policy_repo
from app.core.config import settings
from app.domain.policy_status import status_label
from app.domain.query_compiler import compile_filters, compile_sorts, order_by_clauses
from app.schemas.policy import (
    FilterEntry,
    LineOfBusinessStats,
    Policy,
    PolicySearchResponse,
    SortEntry,
    StatusCount,
)

logger = logging.getLogger(__name__)


def search_policies(
    db: Session,
    filters: list[FilterEntry] | None = None,
    sorts: list[SortEntry] | None = None,
    offset: int = 0,
    limit: int | None = None,
) -> PolicySearchResponse:
    """
    Search policies with UI grid filters, sorting and pagination.

    - ``total`` counts every match regardless of ``offset``/``limit``
    - An ``offset`` past the end returns an empty page, never an error

    Raises:
        PolicyStoreError: If the store fails; no partial result is returned
    """
    if limit is None:
        limit = settings.default_page_size

    predicate = compile_filters(filters)
    sort_spec = compile_sorts(sorts)
    logger.debug(
        "Final search query: where=%s sort=%s from=%s size=%s",
        predicate,
        sort_spec,
        offset,
        limit,
    )

    total = policy_repo.count_policies(db, predicate)
    if offset >= total:
        # Offsets past the end never reach the store
        policies = []
    else:
        policies = policy_repo.find_policies(
            db, predicate, order_by_clauses(sort_spec), offset, min(limit, total)
        )
    logger.debug(f"Returning {len(policies)} results out of {total} total matches")

    return PolicySearchResponse(
        data=[Policy.model_validate(policy) for policy in policies],
        total=total,
        offset=offset,
        size=limit,
    )


def get_line_of_business_stats(db: Session) -> LineOfBusinessStats:
    """
    Distinct lines of business plus policy counts per status.

    Statuses are ordered by code and labelled for display; codes without a
    label are reported as "Unknown". Always computed against the live store.
    """
    lines_of_business = policy_repo.get_distinct_lines_of_business(db)
    logger.debug(f"Found {len(lines_of_business)} unique lines of business")

    statuses = [
        StatusCount(id=status, count=count, name=status_label(status))
        for status, count in policy_repo.count_policies_by_status(db)
    ]
    logger.debug(f"Status counts: {statuses}")

    return LineOfBusinessStats(statuses=statuses, lines_of_business=lines_of_business)
