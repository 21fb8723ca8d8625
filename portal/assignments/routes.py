"""
Assignment Routes
"""

import logging

from flask import render_template, request, redirect, url_for, jsonify

from portal.assignments import assignments_bp
from portal.auth import session_guard
from portal.auth.session_guard import user_required
from portal.errors import NotFoundError, ValidationError
from portal.extensions import db
from portal.models import AssignmentStatus, Role
from portal.services import assignments, credentials
from portal.utils import request_data

logger = logging.getLogger(__name__)


@assignments_bp.route('/upload', methods=['GET'])
@user_required
def upload_form():
    """Submission form listing every admin as a possible target."""
    try:
        admin_names = credentials.list_admin_names()
    except Exception:
        logger.exception('Error fetching admins')
        return 'Internal Server Error', 500

    return render_template('user/upload.html',
                           user=session_guard.current_identity(Role.USER),
                           admins=admin_names)


@assignments_bp.route('/upload', methods=['POST'])
@user_required
def upload():
    data = request_data()
    user = session_guard.current_identity(Role.USER)
    # Forms may omit userId; the submitting user is the requester then.
    # A supplied userId is taken as-is and not checked against the session.
    user_id = data.get('userId') or user.id

    try:
        assignment = assignments.create(user_id, data.get('task'), data.get('admin'))
    except ValidationError as e:
        return jsonify({'message': e.message, 'missing': e.missing}), e.status_code
    except Exception as e:
        db.session.rollback()
        logger.exception('Error submitting assignment')
        return jsonify({'message': 'Internal server error', 'error': str(e)}), 500

    return jsonify({'message': 'Assignment submitted successfully',
                    'assignment': assignment.to_dict()}), 201


def _decide(assignment_id, status):
    try:
        assignments.set_status(assignment_id, status)
    except NotFoundError as e:
        return e.message, e.status_code
    except Exception:
        db.session.rollback()
        logger.exception('Error updating assignment %s', assignment_id)
        return 'Internal Server Error', 500

    return redirect(url_for('assignments.assignment_status',
                            assignment_id=assignment_id,
                            status=status.value.lower()))


@assignments_bp.route('/assignments/<int:assignment_id>/accept', methods=['POST'])
def accept(assignment_id):
    return _decide(assignment_id, AssignmentStatus.ACCEPTED)


@assignments_bp.route('/assignments/<int:assignment_id>/reject', methods=['POST'])
def reject(assignment_id):
    return _decide(assignment_id, AssignmentStatus.REJECTED)


@assignments_bp.route('/assignments/<int:assignment_id>/status')
def assignment_status(assignment_id):
    """Show an assignment after a decision.

    `status` comes from the query string and is only echoed back; the
    page also shows the stored status.
    """
    try:
        assignment = assignments.find_by_id(assignment_id)
    except Exception:
        logger.exception('Error fetching assignment %s', assignment_id)
        return 'Internal Server Error', 500

    if assignment is None:
        return 'Assignment not found', 404
    return render_template('assignments/status.html',
                           assignment=assignment,
                           status=request.args.get('status', ''))
