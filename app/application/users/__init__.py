"""
Application layer for the users bounded context.

Holds the UserService implementation that coordinates the
repository port. No framework or infrastructure imports allowed.
"""
