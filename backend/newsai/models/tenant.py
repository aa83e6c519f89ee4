from sqlalchemy import JSON, Boolean, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from newsai.db.base_class import Base
from newsai.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Tenant(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = 'tenants'
    __table_args__ = (
        UniqueConstraint('label', name='uq_tenants_label'),
    )

    # Routing slug; never changes once the tenant exists.
    label: Mapped[str] = mapped_column(String(63), nullable=False)
    display_name: Mapped[str] = mapped_column(String(200), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    settings_json: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
