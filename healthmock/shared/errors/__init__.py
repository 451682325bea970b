"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain errors and unexpected
faults are consistently translated into JSON envelopes.
"""
