"""
Application layer.

Use-case services orchestrating the core logic and the boundary clients.
"""
