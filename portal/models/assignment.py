"""
Assignment Model
"""

import enum
from datetime import timezone

from portal.extensions import db


class AssignmentStatus(str, enum.Enum):
    PENDING = 'Pending'
    ACCEPTED = 'Accepted'
    REJECTED = 'Rejected'


class Assignment(db.Model):
    """A task submitted by a user to a named admin"""
    __tablename__ = 'assignments'

    id = db.Column(db.Integer, primary_key=True)
    # Loose references: neither is checked against the identity tables
    user_id = db.Column(db.String(80), nullable=False)
    admin = db.Column(db.String(120), nullable=False, index=True)
    task = db.Column(db.Text, nullable=False)
    status = db.Column(
        db.Enum(AssignmentStatus, name='assignment_status',
                values_callable=lambda statuses: [s.value for s in statuses]),
        nullable=False,
        default=AssignmentStatus.PENDING,
    )
    created_at = db.Column(db.DateTime, default=db.func.current_timestamp())

    def to_dict(self):
        return {
            'id': self.id,
            'userId': self.user_id,
            'task': self.task,
            'admin': self.admin,
            'status': self.status.value if self.status else None,
            'createdAt': self._created_at_utc(),
        }

    def _created_at_utc(self):
        # CURRENT_TIMESTAMP is stored naive, in UTC
        if self.created_at is None:
            return None
        created_at = self.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return created_at.isoformat()

    def __repr__(self):
        return f'<Assignment {self.id} to:{self.admin} {self.status}>'
