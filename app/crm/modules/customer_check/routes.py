from __future__ import annotations

from flask import Blueprint, render_template, request

from app.crm.modules.customer_check.client import fetch_customer
from app.crm.modules.customer_check.service import customer_fields, first_customer

bp = Blueprint("customer_check", __name__)


@bp.get("/customers/check")
def check():
    customer_id = request.args.get("id") or ""
    if not customer_id.strip():
        return render_template("customers/check.html", state="missing_id"), 400

    # Fetch errors propagate to the app-level 500 handler.
    customer = first_customer(fetch_customer(customer_id))
    if customer is None:
        return render_template("customers/check.html", state="not_found", customer_id=customer_id), 404

    return render_template(
        "customers/check.html",
        state="updated",
        customer_id=customer_id,
        fields=customer_fields(customer),
    )
