"""External (UI grid) field names and the store fields they refer to."""

FIELD_MAPPING: dict[str, str] = {
    "programLineOfBusinesses": "line_of_business",
    "masterNameInsuredAccountName": "named_insured",
}


def map_field(name: str) -> str:
    """Return the store field for a UI field name, or the name itself when unmapped."""
    return FIELD_MAPPING.get(name, name)
