"""
Key-value storage backends.

Components:
- kv_store.py: in-memory, SQLite and JSON-file stores implementing the KeyValueStore port
"""
