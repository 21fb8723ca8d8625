"""
Assignments Blueprint

Submission by users and review decisions by admins.
"""

from flask import Blueprint

assignments_bp = Blueprint('assignments', __name__)

from portal.assignments import routes  # noqa: E402, F401
