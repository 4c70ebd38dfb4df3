"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, query strings, responses)
    - JSON uses camelCase aliases; Python attributes stay snake_case
    - Update schemas are patches: model_dump(exclude_unset=True) yields only sent fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
