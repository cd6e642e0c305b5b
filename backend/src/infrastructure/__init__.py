"""
Infrastructure Layer - External integrations and implementations.

This layer contains concrete implementations of domain interfaces:
the SQLAlchemy record store, in-app notifications and CSV reporting.
"""
