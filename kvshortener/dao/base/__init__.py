from kvshortener.dao.base.link_base_dao import LinkBaseDAO
from kvshortener.dao.base.link_index_base_dao import LinkIndexBaseDAO


__all__ = [
    'LinkBaseDAO',
    'LinkIndexBaseDAO',
]
