"""Infrastructure — database session management, repositories and logging.

Invariants:
    - Only infrastructure/ talks to SQLAlchemy engines and sessions directly
    - Repositories satisfy the Protocols in core/repository_protocols.py
"""
