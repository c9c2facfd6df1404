"""
Term Model

One row per saved vocabulary entry, owned by exactly one user.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jargon_buster.models.base import Base, TimestampMixin, new_uuid, utcnow


class Term(Base, TimestampMixin):
    __tablename__ = "terms"
    __table_args__ = (
        # date_understood is set exactly when understood is true
        CheckConstraint(
            "(understood AND date_understood IS NOT NULL) "
            "OR (NOT understood AND date_understood IS NULL)",
            name="understood_date_consistent",
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)

    term: Mapped[str] = mapped_column(String(255), nullable=False)
    definition: Mapped[str] = mapped_column(Text, default="", nullable=False)
    initial_thoughts: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    eli5: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    understood: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    date_added: Mapped[datetime] = mapped_column(default=utcnow, nullable=False)
    date_understood: Mapped[Optional[datetime]] = mapped_column(nullable=True)

    # Relationships
    owner: Mapped["User"] = relationship(back_populates="terms")
