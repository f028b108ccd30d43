from sqlalchemy import text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.models.base import Base


class Contact(Base):
    __tablename__ = "contacts"
    # AUTOINCREMENT keeps SQLite from handing out ids of deleted rows again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str]
    email: Mapped[str]
    message: Mapped[str]
    created_at: Mapped[str] = mapped_column(server_default=text("(datetime('now'))"))

    def __repr__(self):
        return f"<Contact(id={self.id}, name='{self.name}', email='{self.email}')>"
