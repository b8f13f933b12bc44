# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell the pack service how to connect to its database
# and how to behave in each environment.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management
# and database engine configuration.
#
# 🔗 Dependencies:
# - settings.py (application settings)
# - database.py (database configuration)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - Infrastructure components

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Database connection configuration
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
