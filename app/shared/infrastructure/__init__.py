"""
Infrastructure layer package for the FreshShare pack service.
Provides the async Postgres engine and session management.
"""

__all__ = []
