"""
Presentation Layer - HTTP interface.

Translates HTTP requests into use case calls and domain results into
JSON responses.
"""
