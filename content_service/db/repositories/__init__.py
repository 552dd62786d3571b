"""
Per-domain repository modules for database access.

Repositories are the only layer that inspects SQLAlchemy errors; they
return Pydantic records and raise the kinds defined in
`content_service.errors`.
"""
