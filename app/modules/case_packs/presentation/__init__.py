"""
Case-pack presentation layer: HTTP routers, schemas and dependency wiring.
"""
