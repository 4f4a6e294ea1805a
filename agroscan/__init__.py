# 📄 File: agroscan/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python that this 'agroscan' folder holds the AgroScan application code
# and records its version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version metadata for the AgroScan
# FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - pyproject.toml (package discovery)

"""
AgroScan - Plant Inspection Record API

Farmers register, log in and keep records of plant and vegetable
inspections, with photos and analysis results attached. Admins can see
and manage everyone's records.
"""

__version__ = "1.0.0"
__title__ = "AgroScan API"
__description__ = "Plant inspection record management API"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
