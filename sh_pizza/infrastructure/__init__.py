"""Infrastructure Layer — database, security primitives and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver/library exceptions are mapped to core/errors.py types at this boundary
"""
