"""HTTP surface for the blog list API.

Blueprints:
- blogs.blogs_bp  - /blogs CRUD
- auth.api.auth_bp - /users and /login

Views get a database Core for the current request via request_core(). The
Core is kept in flask.g and closed automatically on app context teardown.
"""

from flask import g

from ..config import current_settings
from ..db import Core, get_core


def request_core() -> Core:
    """
    Get the autocommit Core for the current request.

    Created on first use per request and closed by close_request_core(),
    which create_app() registers with teardown_appcontext.
    """
    if "core" not in g:
        g.core = get_core(current_settings().database_path)
    return g.core


def close_request_core(e=None):
    """Close the request's Core at the end of the app context."""
    core = g.pop("core", None)
    if core is not None:
        core.close()
