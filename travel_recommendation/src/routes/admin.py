"""
Admin routes: Health checks
"""
import time
from quart import Blueprint, jsonify

bp = Blueprint('admin', __name__)


@bp.route('/healthz')
async def healthz():
    """Lightweight health endpoint returning component status."""
    from travel_recommendation.src.app import aiohttp_session, catalog_loader

    status = {
        'app': 'ok',
        'time': time.time(),
        'ready': bool(aiohttp_session is not None),
        'catalog_loaded': not catalog_loader.cache.is_empty,
        'catalog_url': catalog_loader.url,
    }
    return jsonify(status)


def register(app):
    """Register admin blueprint with app"""
    app.register_blueprint(bp)
