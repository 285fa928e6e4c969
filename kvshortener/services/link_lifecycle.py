"""Link lifecycle management

The lifecycle manager owns every rule about links: how they are created,
resolved, expired, deleted and enumerated. Lambda handlers only translate
HTTP requests into these calls and the raised exceptions into responses.

Expiration is lazy: an expired link is purged the next time it is resolved or
enumerated (Redis TTLs drop the record itself in the meantime). There is no
background sweep.

The index of shortcodes is maintained best-effort. Data store failures while
updating it are logged and swallowed; the outcome of create/resolve/delete is
decided by the link record alone. Stale index entries are pruned by
`enumerate()`.

Classes:
    LinkLifecycleManager:
        Create, resolve, delete and enumerate links on top of the link and index DAOs.

Example:
    >>> manager = LinkLifecycleManager(link_dao=LinkRedisDAO(...), index_dao=LinkIndexRedisDAO(...))
    >>> created = manager.create('https://example.com', expiration='1h', base_url='https://sho.rt')
    >>> created.short_url
    'https://sho.rt/q7GkT2'
    >>> manager.resolve(created.shortcode)
    ResolvedView(kind=<ViewKind.REDIRECT: 'redirect'>, shortcode='q7GkT2', content='https://example.com', clicks=1)
"""

import re
import logging
import dataclasses
from datetime import datetime, UTC

from kvshortener.constants import Shortcode
from kvshortener.models import LinkModel, CreatedLink, ResolvedView, ViewKind
from kvshortener.dao.base import LinkBaseDAO, LinkIndexBaseDAO
from kvshortener.dao.exceptions import DataStoreError, LinkNotFoundError
from kvshortener.exceptions import InvalidInputError, LinkExpiredError
from kvshortener.utils.helpers import expiration_deadline, is_url
from kvshortener.utils.shortener import generate_shortcode


logger = logging.getLogger(__name__)

CUSTOM_SHORTCODE_RE = re.compile(Shortcode.CUSTOM_PATTERN)


class LinkLifecycleManager:
    """Create, resolve, delete and enumerate short links

    Attributes:
        links (LinkBaseDAO):
            Primary store of link records.
        index (LinkIndexBaseDAO):
            Enumerable index of shortcodes.
        shortcode_length (int):
            Length of generated shortcodes.
        max_attempts (int):
            How many generated shortcodes are checked for collisions before
            settling on the last one.
    """

    def __init__(
        self,
        link_dao: LinkBaseDAO,
        index_dao: LinkIndexBaseDAO,
        shortcode_length: int = Shortcode.LENGTH,
        max_attempts: int = Shortcode.MAX_ATTEMPTS,
    ):
        self.links = link_dao
        self.index = index_dao
        self.shortcode_length = shortcode_length
        self.max_attempts = max_attempts

    def create(
        self,
        content: str | None,
        custom_code: str | None = None,
        expiration: str | None = None,
        raw_display: bool = False,
        base_url: str = 'http://localhost:3000',
    ) -> CreatedLink:
        """Store new content under a custom or generated shortcode

        Args:
            content (str | None):
                URL or text to store. Surrounding whitespace is trimmed.
            custom_code (str | None):
                User-chosen shortcode. Blank values count as absent.
            expiration (str | None):
                Expiration class ('never', '10m', '30m', '1h', '24h', '7d', '30d').
                None and unrecognized values mean the link never expires.
            raw_display (bool):
                Always serve the content as plain text.
            base_url (str):
                Public base URL used to build the short URL.

        Returns:
            CreatedLink: the shortcode and its public short URL.

        Raises:
            InvalidInputError:
                If content is empty or the custom code is malformed or reserved.
            LinkAlreadyExistsError:
                If the custom code is already taken.
            DataStoreError:
                If the link record cannot be written.
        """
        if not isinstance(content, str) or not content.strip():
            raise InvalidInputError('Content must not be empty.')
        content = content.strip()

        if custom_code is not None and not isinstance(custom_code, str):
            raise InvalidInputError('Custom code must be a string.')
        custom_code = custom_code.strip() if custom_code else None
        if custom_code:
            if not CUSTOM_SHORTCODE_RE.fullmatch(custom_code):
                raise InvalidInputError('Custom code must be at most 256 characters without spaces, "/", "?" or "#".')
            if custom_code in Shortcode.RESERVED:
                raise InvalidInputError(f"Custom code '{custom_code}' is reserved.")
            shortcode, overwrite = custom_code, False
        else:
            # Best-effort uniqueness: after max_attempts collisions the last
            # generated shortcode is used anyway and overwrites its record.
            shortcode, overwrite = self._generate_shortcode(), True

        now = datetime.now(UTC)
        link = LinkModel(
            shortcode=shortcode,
            content=content,
            is_url=is_url(content),
            raw_display=bool(raw_display),
            created_at=now,
            clicks=0,
            expires_at=expiration_deadline(expiration, now),
        )
        self.links.insert(link, overwrite=overwrite)
        self._add_to_index(shortcode)

        logger.info(
            'Created link.',
            extra={'shortcode': shortcode, 'isUrl': link.is_url, 'custom': bool(custom_code), 'expiresAt': str(link.expires_at)},
        )
        return CreatedLink(shortcode=shortcode, short_url=f'{base_url.rstrip("/")}/{shortcode}')

    def resolve(self, shortcode: str) -> ResolvedView:
        """Count a visit to a link and describe how to present it

        Raises:
            LinkNotFoundError:
                If no link is stored under the shortcode.
            LinkExpiredError:
                If the link has expired. The link is purged before raising.
            DataStoreError:
                If the link record cannot be read or written.
        """
        link = self.links.get(shortcode)

        now = datetime.now(UTC)
        if link.is_expired(now):
            self.links.delete(shortcode)
            self._remove_from_index(shortcode)
            logger.info('Purged expired link.', extra={'shortcode': shortcode, 'expiresAt': str(link.expires_at)})
            raise LinkExpiredError(f"Link with code '{shortcode}' has expired.")

        # NOTE: not atomic with concurrent resolutions (see LinkBaseDAO.update()).
        #       expires_at is carried over unchanged, so the TTL shrinks instead of resetting.
        link = dataclasses.replace(link, clicks=link.clicks + 1)
        self.links.update(link)

        if link.raw_display:
            kind = ViewKind.RAW_TEXT
        elif link.is_url:
            kind = ViewKind.REDIRECT
        else:
            kind = ViewKind.FORMATTED

        return ResolvedView(kind=kind, shortcode=shortcode, content=link.content, clicks=link.clicks)

    def delete(self, shortcode: str) -> None:
        """Delete a link and unregister it from the index

        The record and index entry are removed in two steps. If the second one
        fails, the dangling index entry is pruned by the next enumerate().

        Raises:
            LinkNotFoundError:
                If no link is stored under the shortcode.
        """
        if not self.links.delete(shortcode):
            raise LinkNotFoundError(f"Link with code '{shortcode}' not found.")
        self._remove_from_index(shortcode)
        logger.info('Deleted link.', extra={'shortcode': shortcode})

    def enumerate(self) -> list[LinkModel]:
        """Return all live links in index order, repairing the index on the way

        Index entries without a record are dropped; expired records are deleted
        and dropped. All dropped shortcodes are pruned from the index, so every
        enumeration doubles as a garbage collection pass.

        Cost is one store round trip per indexed shortcode.
        """
        now = datetime.now(UTC)
        live, dead = [], []

        for shortcode in self.index.members():
            try:
                link = self.links.get(shortcode)
            except LinkNotFoundError:
                dead.append(shortcode)
                continue

            if link.is_expired(now):
                self.links.delete(shortcode)
                dead.append(shortcode)
                continue

            live.append(link)

        if dead:
            self._prune_index(dead)

        return live

    def _generate_shortcode(self) -> str:
        shortcode = generate_shortcode(self.shortcode_length)
        for _ in range(self.max_attempts):
            if not self.links.exists(shortcode):
                return shortcode
            shortcode = generate_shortcode(self.shortcode_length)

        logger.warning('Could not find a free shortcode, reusing the last one generated.', extra={'shortcode': shortcode, 'attempts': self.max_attempts})
        return shortcode

    def _add_to_index(self, shortcode: str) -> None:
        try:
            self.index.add(shortcode)
        except DataStoreError:
            logger.exception('Failed to add shortcode to the link index.', extra={'shortcode': shortcode})

    def _remove_from_index(self, shortcode: str) -> None:
        try:
            self.index.remove(shortcode)
        except DataStoreError:
            logger.exception('Failed to remove shortcode from the link index.', extra={'shortcode': shortcode})

    def _prune_index(self, shortcodes: list[str]) -> None:
        try:
            pruned = self.index.prune(shortcodes)
        except DataStoreError:
            logger.exception('Failed to prune stale shortcodes from the link index.', extra={'stale': len(shortcodes)})
        else:
            logger.info('Pruned stale shortcodes from the link index.', extra={'pruned': pruned})
