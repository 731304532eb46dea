"""Policy status codes and their display labels."""

STATUS_LABELS: dict[str, str] = {
    "ALL": "All",
    "PENDING_RENEWAL": "Pending Renewal",
    "APPROVAL_PENDING": "Approval Pending",
    "IN_DESIGN": "In Design",
    "PENDING_QUOTE": "Pending Quote",
    "QUOTED": "Quoted",
    "BOUND": "Bound",
    "ISSUED": "Issued",
    "CLOSED": "Closed",
}

UNKNOWN_STATUS_LABEL = "Unknown"


def status_label(code: str | None) -> str:
    return STATUS_LABELS.get(code, UNKNOWN_STATUS_LABEL) if code else UNKNOWN_STATUS_LABEL
