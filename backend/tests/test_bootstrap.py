from sqlalchemy import select
from sqlalchemy.orm import Session

from newsai.core.config import settings
from newsai.models.tenant import Tenant
from newsai.services.bootstrap_service import ensure_reference_data


def test_demo_tenant_is_seeded_once(db_session: Session, monkeypatch) -> None:
    monkeypatch.setattr(settings, 'DEMO_TENANT_LABEL', 'newsai')

    ensure_reference_data(db_session)
    ensure_reference_data(db_session)
    db_session.commit()

    rows = db_session.scalars(select(Tenant).where(Tenant.label == 'newsai')).all()
    assert len(rows) == 1
    assert rows[0].settings_json['language'] == 'fr'
    assert rows[0].settings_json['use_subdomains'] is False


def test_no_demo_tenant_without_label(db_session: Session, monkeypatch) -> None:
    monkeypatch.setattr(settings, 'DEMO_TENANT_LABEL', None)

    ensure_reference_data(db_session)

    assert db_session.scalar(select(Tenant).where(Tenant.label == 'newsai')) is None
