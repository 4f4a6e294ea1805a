"""
Database infrastructure: engine lifecycle, request-scoped sessions and the
SQLAlchemy implementation of the generic repository.
"""
