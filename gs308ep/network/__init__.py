"""
HTTP client setup and request handling.
"""

from gs308ep.network.client import HttpClient, HttpResponse, build_session, base_url

__all__ = ["HttpClient", "HttpResponse", "build_session", "base_url"]
