from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from newsai.db.session import get_db
from newsai.schemas.settings import BlogSettingsOut, BlogSettingsUpdate
from newsai.services import tenant_service

router = APIRouter(prefix='/tenants/{label}/settings', tags=['settings'])

DEFAULT_SETTINGS: dict[str, Any] = {
    'description': '',
    'theme_color': '#0f172a',
    'language': 'fr',
    'use_subdomains': False,
}

SUPPORTED_LANGUAGES = {'fr', 'en', 'es'}


def _settings_response(raw: dict[str, Any], display_name: str) -> BlogSettingsOut:
    language = raw.get('language')
    return BlogSettingsOut(
        name=raw.get('name') or display_name,
        description=raw.get('description') or DEFAULT_SETTINGS['description'],
        theme_color=raw.get('theme_color') or DEFAULT_SETTINGS['theme_color'],
        language=language if language in SUPPORTED_LANGUAGES else DEFAULT_SETTINGS['language'],
        use_subdomains=bool(raw.get('use_subdomains', DEFAULT_SETTINGS['use_subdomains'])),
    )


@router.get('', response_model=BlogSettingsOut)
def get_settings(label: str, db: Session = Depends(get_db)) -> BlogSettingsOut:
    tenant = tenant_service.get_tenant_by_label(db, label)
    return _settings_response(tenant.settings_json or {}, tenant.display_name)


@router.put('', response_model=BlogSettingsOut)
def update_settings(label: str, payload: BlogSettingsUpdate, db: Session = Depends(get_db)) -> BlogSettingsOut:
    tenant = tenant_service.get_tenant_by_label(db, label)
    raw = dict(tenant.settings_json or {})
    if payload.name is not None:
        raw['name'] = payload.name.strip() or tenant.display_name
    if payload.description is not None:
        raw['description'] = payload.description
    if payload.theme_color is not None:
        raw['theme_color'] = payload.theme_color
    if payload.language is not None:
        raw['language'] = payload.language
    if payload.use_subdomains is not None:
        # Existing ?blog= links keep resolving after this flips.
        raw['use_subdomains'] = payload.use_subdomains

    tenant.settings_json = raw
    db.add(tenant)
    db.commit()
    return _settings_response(raw, tenant.display_name)
