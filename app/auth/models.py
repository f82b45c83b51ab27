from typing import Any

from app.dao.database import Base


class User(Base):
    name: Any
    email: Any
    password: Any  # Stored as given, no hashing

    def __repr__(self):
        return f"{self.__class__.__name__}(id={self.id}, email={self.email})"
