from .session import Base, async_session, create_tables, engine

__all__ = ["Base", "async_session", "create_tables", "engine"]
