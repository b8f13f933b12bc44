# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A small toolbox of helpers other parts of the app share, currently the logging setup.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package and re-exports the structured logging helpers.

# 🔗 Dependencies:
# - app.shared.utils.logging

# 🔄 Connected Modules / Calls From:
# Used by: app.main, middleware, database infrastructure, repositories

from .logging import get_logger, log_context, setup_logging

__all__ = [
    "get_logger",
    "log_context",
    "setup_logging",
]
