"""
Services Package

The credential and assignment stores used by the route handlers.
"""

from portal.services import assignments, credentials

__all__ = ['assignments', 'credentials']
