"""Environment key derivation from field names."""

import re
from typing import List

_GATHER_RE = re.compile(r"([^A-Z]+|[A-Z]+[^A-Z]+|[A-Z]+)")
_ACRONYM_RE = re.compile(r"([A-Z]+)([A-Z][^A-Z]+)")


def split_words(name: str) -> List[str]:
    """Best effort split of a camel-cased name into words.

    An acronym directly followed by a capitalized word is split in two, so
    ``MyISCSIVolume`` gives ``["My", "ISCSI", "Volume"]``.

    Args:
        name: Field name.

    Returns:
        Words in order of appearance.
    """
    words: List[str] = []
    for match in _GATHER_RE.finditer(name):
        word = match.group(0)
        acronym = _ACRONYM_RE.search(word)
        if acronym:
            words.extend([acronym.group(1), acronym.group(2)])
        else:
            words.append(word)
    return words


def derive_key(name: str, prefix: str = "", alt: str = "", split: bool = False) -> str:
    """Build the upper-cased lookup key for a field.

    Args:
        name: Field name.
        prefix: Prefix joined to the key with an underscore.
        alt: Explicit key override, replaces the derived name.
        split: Whether to split the name into words.

    Returns:
        Fully qualified key.
    """
    key = name
    if split:
        words = split_words(name)
        if words:
            key = "_".join(words)
    if alt:
        key = alt
    if prefix:
        key = f"{prefix}_{key}"
    return key.upper()
