from .base import SqlAlchemyRepository
from .contact_repository import ContactRepository


__all__ = [
    "SqlAlchemyRepository",
    "ContactRepository",
]
