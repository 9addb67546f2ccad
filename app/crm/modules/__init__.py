"""
Feature modules live under this package.

Each module owns its routes and templates and reuses the platform primitives
(config, logging, error pages) from the app factory.
"""
