"""Game domain services: board rules and the room registry.

This package contains the in-memory domain logic used by the socket
handlers and HTTP routes, keeping transport concerns separated from core
game mechanics.
"""
