"""
Service layer abstraction.

Each service encapsulates the operations for one entity type over the
in‑memory stores in ``core.store``.  API handlers and the test suite
call services directly; swapping the stores for a real database would
not change their signatures.
"""
