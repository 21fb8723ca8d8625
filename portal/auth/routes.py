"""
Auth Routes

User registration and login. The admin blueprint reuses the two form
handlers below with Role.ADMIN.
"""

import logging

from flask import render_template, request, redirect, url_for, flash

from portal.auth import auth_bp
from portal.auth import session_guard
from portal.auth.session_guard import user_required
from portal.errors import AuthenticationError, ValidationError
from portal.extensions import db
from portal.models import Role
from portal.services import credentials
from portal.utils import request_data

logger = logging.getLogger(__name__)


def handle_register(role, template, login_endpoint):
    """Create an identity from the posted form, bind it and go to login."""
    data = request_data()
    try:
        identity = credentials.register(
            role,
            username=data.get('username'),
            password=data.get('password'),
            fullname=data.get('fullname'),
            email=data.get('email'),
        )
    except ValidationError as e:
        if e.missing:
            flash(f'Please provide: {", ".join(e.missing)}.', 'danger')
        else:
            flash(e.message, 'danger')
        return render_template(template), e.status_code
    except Exception:
        db.session.rollback()
        logger.exception('Error creating %s', role.value)
        flash(f'Error creating {role.value}.', 'danger')
        return render_template(template), 500

    session_guard.bind(identity)
    flash('Registration successful! Please login.', 'success')
    return redirect(url_for(login_endpoint))


def handle_login(role, template, success_url):
    """Authenticate the posted credentials; `success_url` maps identity -> URL."""
    data = request_data()
    try:
        identity = session_guard.authenticate(data.get('username'), data.get('password'), role)
    except AuthenticationError as e:
        return render_template(template, error=e.message), e.status_code
    except Exception:
        logger.exception('Error during %s login', role.value)
        return render_template(template, error='Internal server error'), 500

    session_guard.bind(identity)
    return redirect(success_url(identity))


@auth_bp.route('/user/register', methods=['GET', 'POST'])
def user_register():
    """User registration route"""
    if request.method == 'POST':
        return handle_register(Role.USER, 'user/register.html', 'auth.user_login')
    return render_template('user/register.html')


@auth_bp.route('/user/login', methods=['GET', 'POST'])
def user_login():
    """User login route"""
    if request.method == 'POST':
        return handle_login(Role.USER, 'user/login.html',
                            lambda user: url_for('auth.user_profile'))
    return render_template('user/login.html')


@auth_bp.route('/user/profile')
@user_required
def user_profile():
    user = session_guard.current_identity(Role.USER)
    return render_template('user/profile.html', user=user)


@auth_bp.route('/logout', methods=['POST'])
def logout():
    """Log out both the user and the admin bound to this browser."""
    session_guard.logout()
    flash('You have been logged out successfully.', 'info')
    return redirect(url_for('main.index'))