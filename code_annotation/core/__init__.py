"""Core: pure domain logic (errors, progress, tallies) and boundary protocols.

Invariants:
    - No IO, no logging, no imports from api/, services/ or infrastructure/
"""
