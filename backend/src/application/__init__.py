"""
Application Layer - Use cases for the OD approval workflow.

Use cases orchestrate domain rules against the repository and
notification ports; they never talk to storage directly.
"""
