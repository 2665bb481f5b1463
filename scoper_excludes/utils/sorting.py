"""
Natural sorting helpers.

Digit runs compare by numeric value and letters compare case-insensitively,
so "item2" sorts before "Item10". Case is folded to upper case, so "_" and
"\\" sort after letters: "AcmeBar" comes before "Acme\\Foo".
"""

import re
from typing import Iterable, List, Tuple, Union

_CHUNK_RE = re.compile(r'(\d+)')


def natural_sort_key(value: str) -> Tuple[Union[str, int], ...]:
    """
    Sort key for case-insensitive natural ordering.

    re.split with a capturing group always yields text at even indexes and
    digit runs at odd indexes, so two keys never compare str against int.
    """
    chunks = _CHUNK_RE.split(value.upper())
    return tuple(int(chunk) if i % 2 else chunk for i, chunk in enumerate(chunks))


def natural_sorted(values: Iterable[str]) -> List[str]:
    """Return a new list sorted naturally; ties keep their input order."""
    return sorted(values, key=natural_sort_key)
