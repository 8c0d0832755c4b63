from .admin import admin
from .assessment import assessment

__all__ = ["admin", "assessment"]
