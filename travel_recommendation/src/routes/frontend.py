"""
Frontend routes: the widget page

``GET /?q=...`` is the search submit (button or enter key), ``GET /?clear=1``
is the Clear action. Each request gets its own panel; the catalog cache is
shared through the app's loader.
"""
from quart import Blueprint, request, render_template

from travel_recommendation.src.controller import InteractionController, QueryInput
from travel_recommendation.src.renderer import HtmlPanel, ResultRenderer

bp = Blueprint('frontend', __name__)


@bp.route("/", methods=["GET"])
async def index():
    from travel_recommendation.src.app import catalog_loader

    query_input = QueryInput(request.args.get("q", ""))
    renderer = ResultRenderer(HtmlPanel)
    controller = InteractionController(catalog_loader, renderer, query_input)

    if request.args.get("clear"):
        controller.handle_clear()
    elif "q" in request.args:
        await controller.handle_search()

    return await render_template("index.html", query=query_input.value, panel=renderer.panel)


def register(app):
    """Register frontend blueprint with app"""
    app.register_blueprint(bp)
