"""
Domain Layer - Admissions entities, rules and repository contracts.

This layer has no knowledge of the database, the web framework or any
other infrastructure concern.
"""
