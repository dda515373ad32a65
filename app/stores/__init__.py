"""Data stores for persistence.

Stores handle:
- MongoDB: client lifecycle, database and collection handles

No request validation or response shaping in stores - that belongs in
services and routes.
"""
