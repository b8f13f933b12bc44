"""
Case-pack API package.
"""
