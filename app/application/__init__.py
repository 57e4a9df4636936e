"""
Application layer package.

Services that orchestrate domain ports.
This layer depends on domain ports, never on infrastructure.
"""
