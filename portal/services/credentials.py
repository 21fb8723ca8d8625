"""
Credential Store

Registration and lookup of user and admin identities.
"""

import logging

from sqlalchemy.exc import IntegrityError

from portal.errors import DuplicateIdentityError, ValidationError
from portal.extensions import db
from portal.models import Admin
from portal.utils import text_field

logger = logging.getLogger(__name__)


def register(role, username, password, fullname=None, email=None):
    """Create an identity in the partition for `role`.

    The password is hashed before the record is added to the session, so
    the plaintext never reaches the database.

    Raises:
        ValidationError: username or password is blank
        DuplicateIdentityError: username already taken for this role
    """
    username = text_field(username)
    password = '' if password is None else str(password)
    missing = [name for name, value in (('username', username), ('password', password)) if not value]
    if missing:
        raise ValidationError(missing=missing)

    if find_by_username(username, role) is not None:
        raise DuplicateIdentityError(username, role)

    identity = role.model(
        username=username,
        fullname=text_field(fullname) or None,
        email=text_field(email) or None,
    )
    identity.set_password(password)

    db.session.add(identity)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same name
        db.session.rollback()
        raise DuplicateIdentityError(username, role)

    logger.info('Registered %s %s', role.value, username)
    return identity


def find_by_username(username, role):
    username = text_field(username)
    if not username:
        return None
    return role.model.query.filter_by(username=username).first()


def find_by_id(identity_id, role):
    try:
        identity_id = int(identity_id)
    except (TypeError, ValueError):
        return None
    return db.session.get(role.model, identity_id)


def list_admin_names():
    """Full names of every admin, the targets a user may submit to."""
    admins = Admin.query.order_by(Admin.fullname).all()
    return [admin.fullname for admin in admins if admin.fullname]
