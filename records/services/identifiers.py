import re
from typing import Iterable, Optional, Union

_NON_DIGITS = re.compile(r'\D')


def parse_suffix(identifier) -> Optional[int]:
    """Numeric part of an identifier such as ``P007``; ``None`` if absent."""
    digits = _NON_DIGITS.sub('', str(identifier or ''))
    return int(digits) if digits else None


def generate_identifier(existing: Iterable[Union[dict, str]], prefix: str, *, width: int = 3) -> str:
    """Next identifier for a collection: prefix + (max suffix + 1), zero padded.

    ``existing`` may hold records (dicts with an ``id`` key) or bare
    identifiers.  Identifiers without digits are ignored.  The scan is
    purely local, so two writers scanning the same collection at once can
    produce the same identifier.
    """
    suffixes = []
    for item in existing:
        ident = item.get('id') if isinstance(item, dict) else item
        n = parse_suffix(ident)
        if n is not None:
            suffixes.append(n)
    nxt = (max(suffixes) if suffixes else 0) + 1
    return f"{prefix}{str(nxt).zfill(width)}"
