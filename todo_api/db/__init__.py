"""Database access.

The `store.py` module wraps the MongoDB collection holding todo documents and
opens the connection used by the API at startup.
"""
