"""
User Directory: CRUD REST API for users.

Application package root, laid out as ports & adapters.

Bounded contexts:
    - users: create, read, update and delete users.

Layers:
    - domain: User entity, tagged results, ports (ABCs), errors.
    - application: UserCrudService, the UserService implementation.
    - infrastructure: In-memory and SQL repositories, clocks.
    - interfaces: FastAPI routers, wire schemas, mapping, validation.
    - shared: Cross-cutting concerns (ApiError, security, logging).
"""
