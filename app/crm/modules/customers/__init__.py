"""
Customers module.

- CRUD over the `customer` table exposed as a JSON API
- Business rules (email uniqueness, existence, no-op updates) live in service.py
- Persistence is behind CustomerStore (store.py)
"""
