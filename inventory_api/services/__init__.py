"""
High-level use cases for the inventory API.

Routers (FastAPI endpoints) call these services instead of reading or writing
the JSON document and photo files directly.
"""
