"""
Inventory tracking service.

Items (name, description, optional photo) live in a single JSON document under
the cache directory; photos are stored as files next to it.
"""
