from __future__ import annotations

from typing import Any

# Shown first on the detail card, in this order; remaining keys follow as returned.
KNOWN_FIELDS = ("customer_id", "customer_name", "age", "gender")


def first_customer(payload: Any) -> dict[str, Any] | None:
    """
    Pick the customer record out of a /customers response.

    The API answers with a JSON array; an empty array means no match.
    A bare object is accepted as a single record.
    """
    if isinstance(payload, dict):
        return payload
    if isinstance(payload, list) and payload:
        first = payload[0]
        return first if isinstance(first, dict) else None
    return None


def customer_fields(customer: dict[str, Any]) -> list[tuple[str, Any]]:
    fields = [(k, customer[k]) for k in KNOWN_FIELDS if k in customer]
    fields.extend((k, v) for k, v in customer.items() if k not in KNOWN_FIELDS)
    return fields
