"""
Case-pack domain layer: models, services and repository interfaces.
"""
