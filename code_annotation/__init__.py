"""Code Annotation API package: experiments, assignments and the response envelope.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
