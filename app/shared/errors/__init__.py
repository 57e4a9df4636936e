"""
Shared error handling package.

Centralizes the ApiError payload and the error-to-HTTP mapping so
that every non-2xx response has the same shape.
"""
