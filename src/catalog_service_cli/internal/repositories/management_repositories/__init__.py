from .http import HTTPManagementRepository

__all__ = [
    "HTTPManagementRepository",
]
