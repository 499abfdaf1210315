"""Sources that mdtutor reads tutorials from."""

from .filesystem import FilePath

__all__ = ['FilePath']
