"""
Case-pack application layer: commands, queries and the handlers that run them.
"""
