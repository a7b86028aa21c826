"""
Domain Layer

Business concepts and rules of leave bookkeeping, independent of any
technical implementation details.

Components:
- leave/: employee leave accounts, leave records and the directory service
- shared/: base classes, errors and validators shared across subdomains
"""
