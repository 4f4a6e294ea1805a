"""
Infrastructure layer package for AgroScan.
Provides database connections, sessions, the SQLAlchemy repository base and
local file storage.
"""

__all__ = []
