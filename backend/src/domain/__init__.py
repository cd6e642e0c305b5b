"""
Domain Layer - Entities, value objects and workflow rules.

This layer has no dependencies on frameworks or storage.
"""
