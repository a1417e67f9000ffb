"""Services Layer: request handlers composing repositories with the envelope builder.

Invariants:
    - One handler class per resource, collaborators injected through __init__
    - Handlers raise HTTPError; they never render or log

Design Decisions:
    - Handlers receive the raw Request: identity, path ids and bodies are
      resolved in the order the resource requires
"""
