# 📄 File: agroscan/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# Sets up the helper tools shared across AgroScan, currently the logging setup
# that records what the app is doing.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package; exports structured logging setup and the
# request/user context variables attached to every log record.

# 🔗 Dependencies:
# - logging: Structured logging utilities

# 🔄 Connected Modules / Calls From:
# Used by: agroscan.main, request logging middleware, authentication dependency

from .logging import request_id_var, setup_logging, user_id_var

__all__ = ["request_id_var", "setup_logging", "user_id_var"]
