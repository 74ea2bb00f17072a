"""
Models shared across layers.

- domain: enums and constants
- io: API request/response schemas
"""
