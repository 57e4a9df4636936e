"""
Infrastructure layer package.

Concrete adapters for the domain ports: user storage and clocks.
"""
