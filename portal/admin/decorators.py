"""
Admin Decorator
"""

from portal.auth.session_guard import role_required
from portal.models import Role

# Redirects to /admin/login unless session['admin_id'] resolves to an Admin.
# Regular users cannot pass it even if logged in.
admin_required = role_required(Role.ADMIN)
