"""
Application layer package.

Use cases orchestrate domain lookups and return DTOs.
No HTTP concerns belong here.
"""
