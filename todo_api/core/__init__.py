"""Core configuration and Pydantic models.

Contains:
- config.py: environment-driven settings
- models_io.py: request/response schemas used across routers
"""
