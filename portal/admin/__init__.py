"""
Admin Blueprint

Admin sessions are tracked separately from user sessions, so a browser
can be logged in as one of each.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from portal.admin import routes  # noqa: E402, F401
