"""
Identity Models

Users and admins share one shape and one hashing routine but live in
separate tables. `Role` picks the table.
"""

import enum

from flask import current_app
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash

from portal.extensions import db


class Role(str, enum.Enum):
    """Which identity partition a record belongs to."""
    USER = 'user'
    ADMIN = 'admin'

    @property
    def label(self):
        return self.value.capitalize()

    @property
    def model(self):
        return User if self is Role.USER else Admin


class IdentityMixin:
    """Columns and password handling shared by users and admins"""

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    fullname = db.Column(db.String(120))
    email = db.Column(db.String(120))
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())

    role = None

    def set_password(self, password):
        """Replace the stored hash; the plaintext is never kept."""
        method = current_app.config.get('PASSWORD_HASH_METHOD', 'pbkdf2:sha256')
        self.password_hash = generate_password_hash(password, method=method)

    def check_password(self, password):
        if not self.password_hash or not password:
            return False
        return check_password_hash(self.password_hash, str(password))

    @property
    def display_name(self):
        return self.fullname or self.username

    def __repr__(self):
        return f'<{type(self).__name__} {self.username}>'


class User(UserMixin, IdentityMixin, db.Model):
    """End user who submits assignments"""
    __tablename__ = 'users'

    role = Role.USER


class Admin(IdentityMixin, db.Model):
    """Administrator who reviews assignments addressed to their full name"""
    __tablename__ = 'admins'

    role = Role.ADMIN
