"""
Models Package

Exports all models for easy importing.
"""

from portal.models.identity import Role, User, Admin
from portal.models.assignment import Assignment, AssignmentStatus

__all__ = ['Role', 'User', 'Admin', 'Assignment', 'AssignmentStatus']
