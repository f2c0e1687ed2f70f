"""
Feature modules for Track3D.

Each feature is a self-contained module with:
- models.py - dataclasses for parsed data
- schemas.py - Pydantic schemas for renderer artifacts
- *_parser.py / loader.py - Parsing and loading logic
"""
