"""
Interfaces layer package.

FastAPI routers, wire schemas and request validation.
Routes delegate to resources; no business logic belongs here.
"""
