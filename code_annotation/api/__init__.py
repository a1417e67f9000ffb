"""API Layer: FastAPI routes, dependency providers, rendering and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every endpoint body is an envelope (health probes excepted)

Design Decisions:
    - Thin routes delegate to services/ handlers
"""
