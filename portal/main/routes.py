"""
Main Routes
"""

from flask import render_template

from portal.auth import session_guard
from portal.main import main_bp
from portal.models import Role


@main_bp.route('/')
def index():
    """Landing page with links for whoever is logged in."""
    return render_template('index.html',
                           user=session_guard.current_identity(Role.USER),
                           admin=session_guard.current_identity(Role.ADMIN))
