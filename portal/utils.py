"""
Request helpers shared by the blueprints.
"""

from flask import request


def request_data():
    """Submitted fields from either a JSON body or a form post."""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form


def text_field(value):
    """Stripped string form of a submitted value; '' for None.

    JSON bodies may carry numbers where forms carry strings.
    """
    if value is None:
        return ''
    return str(value).strip()
