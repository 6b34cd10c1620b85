"""Visitor Control package.

Feature modules (visitors, floors, stats, reports, users, system_config) each
follow the same split: a domain model, a repository interface with its
SQLAlchemy implementation, a service holding the use cases and a thin Flask
controller.
"""
