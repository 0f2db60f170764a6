"""
REST API for the Finance Chat Backend.

Serves the mock financial record and the permission-filtered
chat endpoint over HTTP for the demo frontend.
"""

from src.api.main import create_app

__all__ = ["create_app"]
