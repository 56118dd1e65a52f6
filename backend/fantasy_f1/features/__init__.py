"""
Feature modules for Fantasy F1.

Each feature is a self-contained module with:
- models.py - Plain dataclasses
- schemas.py - Pydantic schemas (optional)
- catalog.py - YAML reference data (optional)
- service.py - Business logic
- repository.py - Data access ports (optional)
"""
