"""
Top-level package for the Customer Management API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``customer_api.app.main:app``.
"""

__all__ = []
