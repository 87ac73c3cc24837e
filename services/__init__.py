"""
Dashboard operations on top of the repositories.

Modules:
    access: Role → capability policy (views, categories)
    auth: Login, logout and the current-user check
    accounts: User management for the admin view
    records: Marketing record data entry
    tasks: Task board

Usage:
    from services.access import capabilities_for
    from services.auth import login
    from services.records import RecordService

Example:
    user = login(repositories, "admin", "password")
    capability = capabilities_for(user.role)
    RecordService(repositories.records).save_record(user, capability, payload)
"""

__all__ = [
    "access",
    "auth",
    "accounts",
    "records",
    "tasks",
]
