from newsai.db.base_class import Base
from newsai.models.tenant import Tenant


__all__ = [
    'Base',
    'Tenant',
]
