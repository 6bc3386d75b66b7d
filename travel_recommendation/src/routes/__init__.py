"""
Routes package for the travel recommendation app
Blueprint-based modular route organization
"""


def register_blueprints(app):
    """
    Register all route blueprints with the Quart app

    Admin routes first, then the JSON API, then the page.
    """
    from .admin import register as register_admin
    from .search import register as register_search
    from .frontend import register as register_frontend

    register_admin(app)
    register_search(app)
    register_frontend(app)
