# 📄 File: agroscan/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes user accounts, sign-up and login for AgroScan
# 🧪 Purpose (Technical Summary):
# User management module (domain, application, infrastructure, presentation layers)
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, passlib, python-jose, agroscan.shared
# 🔄 Connected Modules / Calls From:
# agroscan.main, agroscan.api.v1.router

"""
User Management Module

This module handles:
- Registration (always as Farmer) and login with JWT bearer tokens
- Account CRUD; admins manage every account, others only their own
- Roles: Farmer and Admin

Architecture follows Domain-Driven Design:
- Domain: Roles, repository contract, services
- Application: DTOs
- Infrastructure: SQLAlchemy model and repository implementation
- Presentation: API endpoints
"""
