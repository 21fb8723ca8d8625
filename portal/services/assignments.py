"""
Assignment Store

Creation, lookup and review decisions for assignments.
"""

import logging

from portal.errors import NotFoundError, ValidationError
from portal.extensions import db
from portal.models import Assignment, AssignmentStatus
from portal.utils import text_field

logger = logging.getLogger(__name__)


def create(user_id, task, admin):
    """Create a Pending assignment.

    Raises:
        ValidationError: any of user_id, task or admin is blank. Every
            missing field is listed in `missing`.
    """
    fields = {
        'userId': text_field(user_id),
        'task': text_field(task),
        'admin': text_field(admin),
    }
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise ValidationError(missing=missing)

    assignment = Assignment(
        user_id=fields['userId'],
        task=fields['task'],
        admin=fields['admin'],
        status=AssignmentStatus.PENDING,
    )
    db.session.add(assignment)
    db.session.commit()

    logger.info('Assignment %s submitted by %s to %s', assignment.id, assignment.user_id, assignment.admin)
    return assignment


def find_by_admin(admin_name):
    """All assignments addressed to `admin_name`, whatever their status."""
    return Assignment.query.filter_by(admin=admin_name)\
        .order_by(Assignment.created_at, Assignment.id).all()


def find_by_id(assignment_id):
    return db.session.get(Assignment, assignment_id)


def set_status(assignment_id, status):
    """Record a review decision.

    The current status is not checked, so a decided assignment can be
    decided again.

    Raises:
        NotFoundError: no assignment with that id
    """
    assignment = find_by_id(assignment_id)
    if assignment is None:
        raise NotFoundError('Assignment not found')

    assignment.status = AssignmentStatus(status)
    db.session.add(assignment)
    db.session.commit()

    logger.info('Assignment %s marked %s', assignment_id, assignment.status.value)
    return assignment
