"""
Admin Routes

Registration, login and the assignment inbox of an admin. Profile and
inbox pages are addressed by name in the URL and do not check the session.
"""

import logging

from flask import render_template, request, redirect, url_for

from portal.admin import admin_bp
from portal.admin.decorators import admin_required
from portal.auth import session_guard
from portal.auth.routes import handle_login, handle_register
from portal.models import Role
from portal.services import assignments, credentials

logger = logging.getLogger(__name__)


@admin_bp.route('/register', methods=['GET', 'POST'])
def admin_register():
    """Admin registration, mirrors user registration."""
    if request.method == 'POST':
        return handle_register(Role.ADMIN, 'admin/register.html', 'admin.admin_login')
    return render_template('admin/register.html')


@admin_bp.route('/login', methods=['GET', 'POST'])
def admin_login():
    """Admin login; on success lands on the admin's own profile."""
    if request.method == 'POST':
        return handle_login(Role.ADMIN, 'admin/login.html',
                            lambda admin: url_for('admin.admin_profile', admin_name=admin.username))
    return render_template('admin/login.html')


@admin_bp.route('/profile')
@admin_required
def own_profile():
    admin = session_guard.current_identity(Role.ADMIN)
    return redirect(url_for('admin.admin_profile', admin_name=admin.username))


@admin_bp.route('/profile/<admin_name>')
def admin_profile(admin_name):
    try:
        admin = credentials.find_by_username(admin_name, Role.ADMIN)
    except Exception:
        logger.exception('Error fetching admin profile')
        return 'Internal Server Error', 500

    if admin is None:
        return 'Admin not found', 404
    return render_template('admin/profile.html', admin=admin)


@admin_bp.route('/assignments/<admin_name>')
def admin_assignments(admin_name):
    """Every assignment addressed to `admin_name`, any status."""
    try:
        items = assignments.find_by_admin(admin_name)
    except Exception:
        logger.exception('Error fetching assignments')
        return 'Internal Server Error', 500

    logger.debug('Fetched %d assignments for %s', len(items), admin_name)
    return render_template('admin/assignments.html', admin_name=admin_name, assignments=items)
