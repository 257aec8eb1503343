"""Route groups for the Todo API.

This module collects logically-related endpoints:
- health: service liveness
- todos: list, create and delete todo items
- frontend: production-only static bundle with SPA fallback
"""
