from .claims import Claims
from .pagination import Page, PageRequest
from .password import Password

__all__ = ["Claims", "Page", "PageRequest", "Password"]
