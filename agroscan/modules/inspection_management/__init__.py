# 📄 File: agroscan/modules/inspection_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes everything about plant inspections, their photos and their analysis results
# 🧪 Purpose (Technical Summary):
# Inspection management module (domain, application, infrastructure, presentation layers)
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, agroscan.shared
# 🔄 Connected Modules / Calls From:
# agroscan.main, agroscan.api.v1.router

"""
Inspection Management Module

Handles inspection records and the data attached to them:
- Inspections owned by one user (Farmer), visible to admins
- Images stored as paths or URLs, optionally uploaded through the API
- Analyses recorded as given (status, confidence score, recommendation)

Deleting an inspection removes its images and analyses through
ON DELETE CASCADE foreign keys.
"""
