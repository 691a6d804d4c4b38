from flask import Blueprint, jsonify

from app.crm.store import customer_store
from app.crm.utils import iso_timestamp, utcnow

bp = Blueprint("routes", __name__)


@bp.get("/health")
def health():
    """Health check endpoint. Returns JSON."""
    return jsonify({
        "status": "OK",
        "timestamp": iso_timestamp(utcnow()),
        "totalCustomers": len(customer_store()),
    })
