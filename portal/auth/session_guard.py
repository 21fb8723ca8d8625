"""
Session Guard

Authenticates identities and binds them to the signed session cookie.

Only a reference is stored: Flask-Login keeps the user's id under its own
key, the admin id lives in session['admin_id']. Both are resolved against
the database on every request, so a deleted record simply stops being
logged in.
"""

import logging
from functools import wraps

from flask import session, redirect, url_for
from flask_login import login_user, logout_user, current_user

from portal.errors import InvalidCredentialsError, UnknownIdentityError
from portal.models import Role
from portal.services import credentials

logger = logging.getLogger(__name__)

ADMIN_SESSION_KEY = 'admin_id'

LOGIN_ENDPOINTS = {
    Role.USER: 'auth.user_login',
    Role.ADMIN: 'admin.admin_login',
}


def authenticate(username, password, role):
    """Return the identity matching the credentials.

    Raises:
        UnknownIdentityError: no such username for this role
        InvalidCredentialsError: password mismatch
    """
    identity = credentials.find_by_username(username, role)
    if identity is None:
        logger.warning('Login failed: unknown %s %r', role.value, username)
        raise UnknownIdentityError(f'{role.label} not found')
    if not identity.check_password(password):
        logger.warning('Login failed: bad password for %s %r', role.value, username)
        raise InvalidCredentialsError()
    return identity


def bind(identity):
    """Attach `identity` to the current session."""
    if identity.role is Role.USER:
        login_user(identity)
    else:
        session[ADMIN_SESSION_KEY] = identity.id
    logger.info('%s %s logged in', identity.role.label, identity.username)


def current_identity(role):
    """The identity of `role` bound to this request, or None."""
    if role is Role.USER:
        if current_user.is_authenticated:
            return current_user._get_current_object()
        return None

    admin_id = session.get(ADMIN_SESSION_KEY)
    if admin_id is None:
        return None
    admin = credentials.find_by_id(admin_id, Role.ADMIN)
    if admin is None:
        session.pop(ADMIN_SESSION_KEY, None)
    return admin


def role_required(role):
    """Decorator factory: redirect to the role's login page unless bound."""
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            if current_identity(role) is None:
                return redirect(url_for(LOGIN_ENDPOINTS[role]))
            return f(*args, **kwargs)
        return wrapper
    return decorator


user_required = role_required(Role.USER)


def logout():
    """Drop both identities and everything else in the session."""
    logout_user()
    session.clear()
