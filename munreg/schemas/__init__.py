"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Form schemas validate at system boundary (user input) and never touch the DB
    - Wire field names are the aliases (camelCase where the form uses it)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - FormSchema wraps a pydantic model with refinements so every form goes
      through the same shape-then-refine evaluator
"""
