from kvshortener.services.link_lifecycle import LinkLifecycleManager
from kvshortener.services.factory import lifecycle_manager


__all__ = [
    'LinkLifecycleManager',
    'lifecycle_manager',
]
