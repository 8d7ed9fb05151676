# visitorinfo/models/__init__.py
from .visitor import VisitorRecord

__all__ = ["VisitorRecord"]
