"""
Health Mock API — canned HTTP status responses for monitoring tooling.

Application package root. Every endpoint maps a request to a static or
near-static JSON envelope and status code.

Layers:
    - domain: StatusText table, fixed-status and endpoint catalogs, errors.
    - application: Use cases and DTOs (custom-status resolution, health report).
    - interfaces: FastAPI routers, Pydantic envelope schemas.
    - shared: Cross-cutting concerns (errors, middleware, logging, clock).
"""
