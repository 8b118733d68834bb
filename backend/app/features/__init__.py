"""
Feature modules for Helike Planner.

Each feature is a self-contained module with:
- models.py - dataclasses (no database)
- schemas.py - Pydantic schemas
- service.py - Business logic (optional)
- engine/catalog/relay/renderer - feature-specific logic
"""
