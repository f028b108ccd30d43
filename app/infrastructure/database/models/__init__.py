from .base import Base
from .contact import Contact


__all__ = [
    "Base",
    "Contact",
]
