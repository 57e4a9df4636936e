"""
Domain layer package.

Entities, result types, errors and port interfaces.
No framework imports, no IO, no side effects.
"""
