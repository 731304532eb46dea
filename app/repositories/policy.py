import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.sql.elements import ColumnElement

from app.db.models.policy import Policy as PolicyModel
from app.db.models.policy import PolicyLineOfBusiness as LineOfBusinessModel
from app.errors import PolicyStoreError

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Re-raise driver/ORM failures as PolicyStoreError."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error(f"Policy store failure during {operation}: {exc}")
        raise PolicyStoreError(str(exc)) from exc


def count_policies(db: Session, predicate: ColumnElement) -> int:
    """Count all policies matching the predicate, ignoring pagination."""
    with _store_errors("count_policies"):
        return db.query(func.count(PolicyModel.id)).filter(predicate).scalar() or 0


def find_policies(
    db: Session,
    predicate: ColumnElement,
    order_by: list,
    offset: int,
    limit: int,
) -> list[PolicyModel]:
    """Get one page of policies matching the predicate, lines of business loaded."""
    with _store_errors("find_policies"):
        return (
            db.query(PolicyModel)
            .options(selectinload(PolicyModel.lines_of_business))
            .filter(predicate)
            .order_by(*order_by)
            .offset(offset)
            .limit(limit)
            .all()
        )


def get_distinct_lines_of_business(db: Session) -> list[str]:
    """Get every distinct line of business, alphabetically."""
    with _store_errors("get_distinct_lines_of_business"):
        rows = (
            db.query(LineOfBusinessModel.name)
            .distinct()
            .order_by(LineOfBusinessModel.name)
            .all()
        )
    return [name for (name,) in rows]


def count_policies_by_status(db: Session) -> list[tuple[str, int]]:
    """Get ``(status, count)`` pairs ordered by status code."""
    with _store_errors("count_policies_by_status"):
        rows = (
            db.query(PolicyModel.status, func.count(PolicyModel.id))
            .group_by(PolicyModel.status)
            .order_by(PolicyModel.status)
            .all()
        )
    return [(status, count) for status, count in rows]


def create_policy(
    db: Session,
    policy_number: str,
    named_insured: str,
    status: str,
    line_of_business: list[str],
    effective_date=None,
    expiration_date=None,
    premium=None,
    MNPID: str | None = None,
    MBU_handler: str | None = None,
    producing_UW: str | None = None,
) -> PolicyModel:
    """Create a policy with its lines of business. Used by the seed script and tests."""
    db_policy = PolicyModel(
        policy_number=policy_number,
        named_insured=named_insured,
        status=status.upper(),
        effective_date=effective_date,
        expiration_date=expiration_date,
        premium=premium,
        MNPID=MNPID,
        MBU_handler=MBU_handler,
        producing_UW=producing_UW,
        lines_of_business=[LineOfBusinessModel(name=name) for name in line_of_business],
    )
    db.add(db_policy)
    db.commit()
    db.refresh(db_policy)
    return db_policy


def delete_all_policies(db: Session) -> int:
    """Delete every policy and its lines of business. Returns the number of policies removed."""
    db.query(LineOfBusinessModel).delete()
    deleted = db.query(PolicyModel).delete()
    db.commit()
    return deleted
