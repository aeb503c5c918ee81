"""
Repository layer.

Repositories wrap the SQL for a single table and hand back entities,
keeping queries out of the service layer.
"""
