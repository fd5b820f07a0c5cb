"""Human-readable rendering of a scanner's position, used for ``repr()``."""

import json


def _quote(text: str) -> str:
    # Double-quoted with backslash escapes; non-ASCII stays readable
    return json.dumps(text, ensure_ascii=False)


def _context_before(text: str, pos: int, limit: int) -> str:
    if pos > limit:
        return "..." + text[pos - limit : pos]
    return text[:pos]


def _context_after(text: str, pos: int, limit: int) -> str:
    if len(text) - pos > limit:
        return text[pos : pos + limit] + "..."
    return text[pos:]


def describe(scanner) -> str:
    """
    Describe where a scanner stands.

    Examples:
        >>> s = ScannerCore("Fri Dec 12 1975 14:39")
        >>> describe(s)
        '<ScannerCore 0/21 @ "Fri D...">'
        >>> s.scan_until(r"12")
        'Fri Dec 12'
        >>> describe(s)
        '<ScannerCore 10/21 "...ec 12" @ " 1975...">'
    """
    name = type(scanner).__name__
    text = scanner.text
    if text is None:
        return f"<{name} uninitialized>"
    if scanner.eos():
        return f"<{name} fin>"

    pos = scanner.pos
    limit = scanner.INSPECT_LENGTH
    after = _quote(_context_after(text, pos, limit))
    if pos == 0:
        return f"<{name} {pos}/{len(text)} @ {after}>"

    before = _quote(_context_before(text, pos, limit))
    return f"<{name} {pos}/{len(text)} {before} @ {after}>"
