"""
Flask Extensions

User identities are tracked by Flask-Login. Admin identities are kept in a
separate session key so a browser can hold one of each at the same time.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for user authentication (NOT for admin)
login_manager = LoginManager()
