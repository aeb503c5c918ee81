"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the stored entities in ``models`` so the
wire format can change without touching persistence.
"""
