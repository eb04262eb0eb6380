from . import models  # noqa: F401
from .base import Base
from .session import build_engine, build_session_factory, get_session_factory

__all__ = ["Base", "build_engine", "build_session_factory", "get_session_factory"]
