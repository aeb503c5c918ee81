"""
Application package for the customer service.

The code is split into layers: ``api`` holds the HTTP routers,
``schemas`` the request/response models, ``services`` the business
rules, ``repositories`` the SQL and ``models`` the stored entities.
``core`` contains configuration, logging, database bootstrap and error
handling shared by all layers.
"""

from .main import app  # noqa: F401
