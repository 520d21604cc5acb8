"""Session loading module."""

from .loaders import load_session, load_sessions_csv

__all__ = ["load_session", "load_sessions_csv"]
