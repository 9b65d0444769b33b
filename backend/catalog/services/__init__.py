"""Services Layer — product catalog operations and message dispatch.

Invariants:
    - Services receive an AsyncSession; they never create engines or connections
    - Message dispatch uses explicit dict mapping (no auto-discovery)
"""
