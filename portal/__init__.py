"""
Assignment Portal - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask
from portal.extensions import db, login_manager
from portal.config import Config


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(level=app.config.get('LOG_LEVEL', 'INFO'),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    # Register blueprints
    from portal.main import main_bp
    from portal.auth import auth_bp
    from portal.admin import admin_bp
    from portal.assignments import assignments_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')
    app.register_blueprint(assignments_bp)

    # Context processor for admin flag
    @app.context_processor
    def inject_identities():
        """Expose the bound admin to every template."""
        from portal.auth.session_guard import current_identity
        from portal.models import Role
        return dict(current_admin=current_identity(Role.ADMIN))

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        from portal.models import Role
        from portal.services.credentials import find_by_id
        return find_by_id(user_id, Role.USER)

    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') and not app.testing:
            os.makedirs(os.path.join(Config.basedir, 'instance'), exist_ok=True)
        db.create_all()

    return app
