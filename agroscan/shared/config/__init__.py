# 📄 File: agroscan/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell AgroScan which database to use, how to sign
# login tokens and where to keep uploaded photos.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management.
#
# 🔗 Dependencies:
# - settings.py (application settings)
# - database.py (declarative base and engine options)
#
# 🔄 Connected Modules / Calls From:
# - agroscan.main (application startup)
# - All modules requiring configuration

from .settings import Settings, TokenSettings, get_settings

__all__ = [
    "get_settings",
    "Settings",
    "TokenSettings",
]
