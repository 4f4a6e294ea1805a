# 📄 File: agroscan/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Core rules for user accounts: unique emails, roles, who may change what
# 🧪 Purpose (Technical Summary):
# Domain layer: roles, repository contract and services for users
# 🔗 Dependencies:
# Subpackages models, repositories, services
# 🔄 Connected Modules / Calls From:
# Application, infrastructure and presentation layers
