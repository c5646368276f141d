"""
Router utility functions.

Contains helpers extracted from router endpoints to keep them clean.
"""

from dataroom.api.routers.router_utils.error_utils import STATUS_BY_ERROR_KIND, error_response

__all__ = ["STATUS_BY_ERROR_KIND", "error_response"]
