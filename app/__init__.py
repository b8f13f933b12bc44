# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'app' folder holds the FreshShare pack service and records its version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version and package metadata.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - pyproject.toml (package discovery)

"""
FreshShare Pack Service

Reads GS1-128 case labels, keeps a catalog of case packs and commodity
default weights, resolves case weights, and works out how bulk cases split
into shares for group buys.
"""

__version__ = "1.0.0"
__title__ = "FreshShare Pack Service"
__description__ = "Case label parsing, case-pack catalog and auto-split"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]
