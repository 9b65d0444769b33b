"""Pydantic Schemas — request/response validation for API and message boundaries.

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
