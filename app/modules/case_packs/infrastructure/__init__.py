"""
Case-pack infrastructure: Postgres persistence.
"""
