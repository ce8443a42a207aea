"""Setting model: the single global platform configuration row."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from platform_settings.db.session import Base


class Setting(Base):
    """Global platform settings: identity, branding asset URLs, Pluggou credentials.

    Exactly one row is expected (seeded by migration). Column names for the
    branding assets keep the historical ``plataform_`` prefix used by clients.
    """

    __tablename__ = "settings"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    platform_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    platform_description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Branding asset URLs
    plataform_logo: Mapped[str | None] = mapped_column(Text, nullable=True)
    plataform_banner: Mapped[str | None] = mapped_column(Text, nullable=True)
    plataform_banner_2: Mapped[str | None] = mapped_column(Text, nullable=True)
    plataform_banner_3: Mapped[str | None] = mapped_column(Text, nullable=True)
    register_banner: Mapped[str | None] = mapped_column(Text, nullable=True)
    login_banner: Mapped[str | None] = mapped_column(Text, nullable=True)
    deposit_banner: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Pluggou integration
    pluggou_base_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    pluggou_api_key: Mapped[str | None] = mapped_column(Text, nullable=True)
    pluggou_organization_id: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )
