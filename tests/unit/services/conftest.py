import pytest

from kvshortener.models import LinkModel
from kvshortener.dao.base import LinkBaseDAO, LinkIndexBaseDAO
from kvshortener.dao.exceptions import LinkAlreadyExistsError, LinkNotFoundError
from kvshortener.services import LinkLifecycleManager


class InMemoryLinkDAO(LinkBaseDAO):
    """Dict-backed link store without TTLs (expiry is only enforced lazily)"""

    def __init__(self):
        self.records: dict[str, LinkModel] = {}

    def exists(self, shortcode, **kwargs):
        return shortcode in self.records

    def insert(self, link, overwrite=False, **kwargs):
        if not overwrite and link.shortcode in self.records:
            raise LinkAlreadyExistsError(f"Link with code '{link.shortcode}' already exists.")
        self.records[link.shortcode] = link
        return self

    def get(self, shortcode, **kwargs):
        try:
            return self.records[shortcode]
        except KeyError:
            raise LinkNotFoundError(f"Link with code '{shortcode}' not found.") from None

    def update(self, link, **kwargs):
        self.records[link.shortcode] = link
        return self

    def delete(self, shortcode, **kwargs):
        return self.records.pop(shortcode, None) is not None


class InMemoryLinkIndexDAO(LinkIndexBaseDAO):
    """Insertion-ordered index of shortcodes"""

    def __init__(self):
        self.shortcodes: list[str] = []

    def add(self, shortcode, **kwargs):
        if shortcode in self.shortcodes:
            return False
        self.shortcodes.append(shortcode)
        return True

    def remove(self, shortcode, **kwargs):
        if shortcode not in self.shortcodes:
            return False
        self.shortcodes.remove(shortcode)
        return True

    def members(self, **kwargs):
        return list(self.shortcodes)

    def prune(self, shortcodes, **kwargs):
        return sum(self.remove(shortcode) for shortcode in shortcodes)


@pytest.fixture
def link_dao():
    return InMemoryLinkDAO()


@pytest.fixture
def index_dao():
    return InMemoryLinkIndexDAO()


@pytest.fixture
def manager(link_dao, index_dao):
    return LinkLifecycleManager(link_dao=link_dao, index_dao=index_dao)
