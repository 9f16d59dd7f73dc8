"""Product CRUD API.

A small FastAPI service exposing create/read/update/delete operations for a single
Product resource stored in a relational table.
"""

__version__ = "0.1.0"
