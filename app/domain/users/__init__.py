"""
Users bounded context: domain layer.

Contains the User entity, the tagged result types returned by
service operations, and the ports the outside world implements.
"""
