from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from shiftdesk.db.database import Base


class Employees(Base):
    __tablename__ = "Employee"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column("Name", String(255), nullable=False)
