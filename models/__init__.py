"""
SQLAlchemy model and shared enumerations.

Models:
    base: Declarative base and the closed enumerations (Role, Category,
          Channel, Objective, TaskStatus, View, MetricField)
    kv_entry: The key/value table backing every dashboard collection

Usage:
    from models.base import Category, Channel, Role
    from models.kv_entry import KeyValueEntry

Example:
    entry = KeyValueEntry(key="digimark:tasks", value="[]")
    session.merge(entry)
    session.commit()
"""

__all__ = [
    "base",
    "kv_entry",
]
