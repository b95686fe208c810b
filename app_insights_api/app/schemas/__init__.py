"""
Pydantic schema definitions for API payloads.

Each entity type (applications, user analytics, log entries, sales
comments) defines its own models for request and response bodies.
Records are serialised with the camelCase keys used by the seed
datasets (``Id``, ``appName``, ``lastActivity`` ...), while Python
code works with snake_case attributes.
"""
