"""
Security cross-cutting concerns: secure response headers and rate limiting.
"""
