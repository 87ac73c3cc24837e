"""
Persistence for the dashboard collections.

Modules:
    kv: KeyValueStore interface and its SQLAlchemy implementation
    repositories: Typed per-collection repositories (users, marketing
                  records, tasks, current-user pointer)
    seed: Initial users and tasks

Usage:
    from core.database import SessionLocal
    from storage.kv import SQLKeyValueStore
    from storage.repositories import build_repositories

Example:
    repositories = build_repositories(SQLKeyValueStore(SessionLocal))
    users = repositories.users.get_all()   # seeds the three default accounts
"""

__all__ = [
    "kv",
    "repositories",
    "seed",
]
