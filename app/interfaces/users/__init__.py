"""
HTTP interface for the users bounded context.

Wire schemas, domain/wire mapping, request validation,
the UserResource controller and its FastAPI routes.
"""
