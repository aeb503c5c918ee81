"""
Persistence-side entities.

Entities mirror database rows and are never returned from the API
directly; the service layer converts them into schemas first.
"""
