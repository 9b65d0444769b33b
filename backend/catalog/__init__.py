"""Products Catalog Package — product CRUD and batch validation microservice.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
