"""
Core utilities and configuration for the Digimark marketing dashboard.

This package provides foundational components used throughout the backend:

Modules:
    config: Application configuration and environment variable management
    database: Engine and session factory for the key-value store table
    exceptions: Custom exception hierarchy for error handling
    logging: Logging configuration and utilities

Usage:
    from core.config import settings
    from core.database import SessionLocal, init_db
    from core.exceptions import AuthenticationError, StorageError
    from core.logging import setup_logging

Example:
    # Initialize logging
    setup_logging()

    # Make sure the store table exists
    init_db()
"""

__all__ = [
    "config",
    "database",
    "exceptions",
    "logging",
]
