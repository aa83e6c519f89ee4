from newsai.services import bootstrap_service, routing_service, tenant_service

__all__ = [
    'bootstrap_service',
    'routing_service',
    'tenant_service',
]
