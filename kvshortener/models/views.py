from dataclasses import dataclass
from enum import StrEnum


class ViewKind(StrEnum):
    """How a resolved link should be presented."""

    REDIRECT = 'redirect'  # redirect the client to the stored URL
    RAW_TEXT = 'raw_text'  # serve the content as plain text
    FORMATTED = 'formatted'  # serve the content as a formatted page


# fmt: off
@dataclass(frozen=True)
class ResolvedView:
    kind: ViewKind
    shortcode: str
    content: str     # Redirect target for ViewKind.REDIRECT
    clicks: int      # Click count after this resolution


@dataclass(frozen=True)
class CreatedLink:
    shortcode: str
    short_url: str   # Public URL, e.g. https://example.com/abc123
# fmt: on
