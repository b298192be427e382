"""Icon naming conventions: slugs, component names and mode signals."""

import re
import unicodedata

from .config import NamingConfig


def slugify(name: str) -> str:
    """Normalize a file name into a hyphenated identifier.

    Diacritics are stripped, the result is lowercased, runs of anything
    other than [a-z0-9] become a single hyphen and edge hyphens are trimmed.

    Args:
        name: File name (with or without the .svg extension removed)

    Returns:
        Slug such as "flag-cote-d-ivoire"
    """
    decomposed = unicodedata.normalize("NFD", name)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    slug = re.sub(r"[^a-z0-9]+", "-", stripped.lower())
    return slug.strip("-")


def to_component_name(slug: str) -> str:
    """Convert a slug to a PascalCase component name."""
    return "".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def _has_signal(name: str, prefixes: list[str], words: list[str]) -> bool:
    slug = slugify(name)
    if any(slug.startswith(prefix) for prefix in prefixes):
        return True
    tokens = set(slug.split("-"))
    return any(word in tokens for word in words)


def is_multicolor_name(name: str, naming: NamingConfig) -> bool:
    """Whether the name marks a flag/brand icon whose colors are kept."""
    return _has_signal(name, naming.multicolor_prefixes, naming.multicolor_words)


def is_hybrid_name(name: str, naming: NamingConfig) -> bool:
    """Whether the name marks an intentional fill+stroke icon."""
    return _has_signal(name, naming.hybrid_prefixes, naming.hybrid_words)
