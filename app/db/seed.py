"""Load sample policies for local development.

Run with ``python -m app.db.seed``. Existing policies are removed first.
"""

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

import app.repositories.policy as policy_repo
from app.db.base import SessionLocal

logger = logging.getLogger(__name__)

SAMPLE_POLICIES = [
    {
        "policy_number": "POL001",
        "named_insured": "Acme Corporation",
        "line_of_business": ["Commercial Auto"],
        "status": "ACTIVE",
        "effective_date": date(2024, 1, 1),
        "expiration_date": date(2025, 1, 1),
        "premium": Decimal("5000.00"),
    },
    {
        "policy_number": "POL002",
        "named_insured": "XYZ Industries",
        "line_of_business": ["General Liability"],
        "status": "PENDING",
        "effective_date": date(2024, 2, 1),
        "expiration_date": date(2025, 2, 1),
        "premium": Decimal("7500.00"),
    },
    {
        "policy_number": "POL003",
        "named_insured": "ABC Company",
        "line_of_business": ["Workers Compensation"],
        "status": "ACTIVE",
        "effective_date": date(2024, 3, 1),
        "expiration_date": date(2025, 3, 1),
        "premium": Decimal("3000.00"),
    },
]


def seed_policies(db: Session) -> int:
    """Replace all policies with SAMPLE_POLICIES. Returns the number inserted."""
    deleted = policy_repo.delete_all_policies(db)
    logger.info(f"Cleared {deleted} existing policies")

    for policy in SAMPLE_POLICIES:
        policy_repo.create_policy(db, **policy)
    logger.info(f"Inserted {len(SAMPLE_POLICIES)} sample policies")
    return len(SAMPLE_POLICIES)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    db = SessionLocal()
    try:
        seed_policies(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
