# 📄 File: agroscan/modules/inspection_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Database tables and data access for inspections, photos and analyses
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for inspection management
# 🔗 Dependencies:
# SQLAlchemy, agroscan.shared.infrastructure.database
# 🔄 Connected Modules / Calls From:
# agroscan.main, migrations, connection.load_models
