"""
Feature modules live under this package.

Each module owns its models, persistence, service and routes, and reuses
the platform primitives (config, DB session, error handlers).
"""
