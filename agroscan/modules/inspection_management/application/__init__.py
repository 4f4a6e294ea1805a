# 📄 File: agroscan/modules/inspection_management/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# Data shapes exchanged between the inspection endpoints and services
# 🧪 Purpose (Technical Summary):
# Application layer package; DTOs live in application.dto
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# Inspection services and routers
