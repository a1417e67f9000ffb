"""Pydantic Schemas: the envelope, its payload shapes and request bodies.

Invariants:
    - Schemas are the wire contract; models/ are persistence
    - Domain types from core/ used for enum fields
"""
