"""
Book catalog service.

Manages book records (create, update, delete, lookup by id or ISBN and
filtered search) behind a hexagonal architecture:

- domain: entities, value objects, validators, ports and use-case services
- infrastructure: storage adapters implementing the domain ports
- api: FastAPI routes that translate HTTP to use-case calls
"""

__version__ = "1.0.0"
