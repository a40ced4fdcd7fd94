"""Infrastructure Layer — database engine, driver error translation, logging setup.

Invariants:
    - Infrastructure never imports from api/
    - Driver exceptions are translated here, never inspected by routes
"""
