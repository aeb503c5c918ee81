"""
Service layer.

Services encapsulate the business rules of a domain and sit between the
API handlers and the repositories.
"""
