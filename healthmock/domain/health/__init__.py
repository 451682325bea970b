"""
Health bounded context — domain layer.

This module contains the static data every responder is built from:
- StatusText table (status code to canonical text)
- Fixed-status catalog for the /health/<code> endpoints
- Endpoint catalog advertised by the root and not-found responders
"""
