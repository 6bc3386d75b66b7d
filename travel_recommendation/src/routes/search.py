"""
Search routes: JSON search endpoint and the card "Visit" action
"""
import logging

from quart import Blueprint, request, jsonify

from travel_recommendation.providers.base import LoadError
from travel_recommendation.src.controller import GENERIC_FAILURE_MESSAGE
from travel_recommendation.src.search_engine import search

bp = Blueprint('search', __name__, url_prefix='/api')

logger = logging.getLogger(__name__)


@bp.route("/search", methods=["POST"])
async def api_search():
    """
    Request JSON: {"query": "..."}
    Response JSON: {"items": [...], "message": "..."}

    A body that is not a JSON object is treated as an empty query. Failures
    answer with the generic message only: 502 when the catalog cannot be
    loaded, 500 for anything else.
    """
    from travel_recommendation.src.app import catalog_loader

    payload = await request.get_json(silent=True)
    query = payload.get("query") if isinstance(payload, dict) else ""
    try:
        catalog = await catalog_loader.load()
        result = search(query, catalog)
    except LoadError:
        logger.exception("Search error for query %r", query)
        return jsonify({"items": [], "message": GENERIC_FAILURE_MESSAGE}), 502
    except Exception:
        logger.exception("Search error for query %r", query)
        return jsonify({"items": [], "message": GENERIC_FAILURE_MESSAGE}), 500

    return jsonify(result.to_dict())


@bp.route("/visit", methods=["POST"])
async def api_visit():
    """Log a card's Visit action. No state changes."""
    payload = await request.get_json(silent=True) or {}
    logger.info("Visit clicked: %s", payload)
    return jsonify({"ok": True})


def register(app):
    """Register search blueprint with app"""
    app.register_blueprint(bp)
