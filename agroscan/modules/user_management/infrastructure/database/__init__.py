# 📄 File: agroscan/modules/user_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Database table and data access for user accounts
# 🧪 Purpose (Technical Summary):
# SQLAlchemy model and repository implementation for user management
# 🔗 Dependencies:
# SQLAlchemy, agroscan.shared.infrastructure.database
# 🔄 Connected Modules / Calls From:
# agroscan.main, migrations, connection.load_models
