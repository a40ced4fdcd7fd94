"""Repositories — SQL implementations of the core repository protocols.

Convention for feature modules:
    1. Declare the aggregate's contract as a Protocol in core/repository_protocols.py.
    2. Implement it here as Sql<Aggregate>Repository over an AsyncSession, one file
       per aggregate. Reads return values (or None); writes return a DataResult
       and never raise for constraint failures.
    3. Expose a FastAPI dependency that builds the repository from get_db.
    4. Routes declare the protocol type, await the repository and pass write
       results through api.responses.respond() so known data errors reach the
       client as the normalized 400 body.

Invariants:
    - Repositories never import from api/
    - Repositories own commit/rollback for their writes
"""
