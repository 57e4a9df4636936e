"""
Shared module package.

Cross-cutting concerns:
- ApiError payload and error handlers
- Security middleware and rate limiting
- Logging configuration
"""
