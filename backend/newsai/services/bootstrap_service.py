import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from newsai.core.config import settings
from newsai.db.base import Base
from newsai.models.tenant import Tenant


logger = logging.getLogger(__name__)

DEFAULT_BLOG_SETTINGS = {
    'description': "L'actualité de l'IA, décryptée pour vous.",
    'theme_color': '#0f172a',
    'language': 'fr',
    'use_subdomains': False,
}


def ensure_schema(db: Session) -> None:
    Base.metadata.create_all(bind=db.get_bind())


def ensure_reference_data(db: Session) -> None:
    label = (settings.DEMO_TENANT_LABEL or '').strip().lower()
    if not label:
        return

    tenant = db.scalar(select(Tenant).where(Tenant.label == label))
    if tenant:
        return

    tenant = Tenant(
        label=label,
        display_name=settings.DEMO_TENANT_NAME,
        is_active=True,
        settings_json={'name': settings.DEMO_TENANT_NAME, **DEFAULT_BLOG_SETTINGS},
    )
    db.add(tenant)
    db.flush()
    logger.info('Seeded demo tenant %s', label)
