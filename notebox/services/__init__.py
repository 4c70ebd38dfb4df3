"""Services — orchestration over repository Protocols (no SQLAlchemy imports)."""
