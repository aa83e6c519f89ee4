from newsai.models.tenant import Tenant

__all__ = [
    'Tenant',
]
