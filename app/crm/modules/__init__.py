"""
Feature modules live under this package.

Each module owns its blueprint, models and service functions, and reads data
through the shared customer store handle.
"""
