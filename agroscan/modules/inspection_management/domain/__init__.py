# 📄 File: agroscan/modules/inspection_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Core rules about who may see and change inspections
# 🧪 Purpose (Technical Summary):
# Domain layer: enums, repository contracts and services for inspections
# 🔗 Dependencies:
# Subpackages models, repositories, services
# 🔄 Connected Modules / Calls From:
# Application, infrastructure and presentation layers
