from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cms.infrastructure.database.base import Base


class SiteSettingModel(Base):
    """ORM model — maps to the 'settings' key/value table."""

    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<SiteSettingModel(key='{self.key}')>"
