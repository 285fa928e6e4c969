from kvshortener.models.link_model import LinkModel
from kvshortener.models.views import CreatedLink, ResolvedView, ViewKind


__all__ = [
    'LinkModel',
    'CreatedLink',
    'ResolvedView',
    'ViewKind',
]
