"""
Interfaces layer package.

Contains FastAPI routers and Pydantic response envelopes.
No business logic belongs here.
Routes call use cases and return responses.
"""
