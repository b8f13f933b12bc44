"""
Feature modules of the FreshShare pack service.
"""
