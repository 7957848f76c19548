"""
Infrastructure Layer - External integrations and implementations.

This layer contains concrete implementations of domain and application
interfaces and integrations with external services (database, SMTP).
"""
