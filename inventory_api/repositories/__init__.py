"""
Persistence adapters.

The JSON document holds the item records; photo bytes are kept as files next
to it. Services depend on these classes rather than touching the files.
"""
