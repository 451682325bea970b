"""
Shared module package.

Contains cross-cutting concerns used by every responder:
- Error handling and mapping
- Request logging middleware
- Logging configuration
- Timestamp and uptime clock
"""
