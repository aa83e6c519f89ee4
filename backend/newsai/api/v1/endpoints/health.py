from fastapi import APIRouter

from newsai.core.config import settings


router = APIRouter(tags=['health'])


@router.get('/health')
def health() -> dict[str, str]:
    return {'status': 'ok', 'environment': settings.APP_ENV}
