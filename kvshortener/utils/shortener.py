"""Shortcode generation utility

Functions:
    generate_shortcode(length=6):
        Generate a random Base62 shortcode suitable for use as a URL slug.

Example:
    >>> from kvshortener.utils import generate_shortcode
    >>> generate_shortcode()
    'q7GkT2'
"""

import secrets
import string

from kvshortener.constants import Shortcode


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits


def generate_shortcode(length: int = Shortcode.LENGTH) -> str:
    """Generate a random shortcode of `length` Base62 characters.

    Every character is drawn uniformly and independently from [a-zA-Z0-9]
    using the `secrets` CSPRNG.

    Args:
        length (int, optional):
            Number of characters in the shortcode. Defaults to 6.

    Returns:
        str: A random alphanumeric shortcode.

    NOTE:
        The output is not guaranteed to be unique. Callers check the data
        store for collisions (see LinkLifecycleManager.create()).
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    return ''.join(secrets.choice(ALPHABET) for _ in range(length))
