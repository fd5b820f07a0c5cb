import logging
import re
from functools import lru_cache

from .errors import InvalidPatternError

log = logging.getLogger(__name__)

# Any single codepoint, newline included
ANY_CHAR = re.compile(".", re.DOTALL)


@lru_cache(maxsize=256)
def _compile(source: str, flags: int) -> re.Pattern:
    return re.compile(source, flags)


def coerce_pattern(pattern, flags: int = 0) -> re.Pattern:
    """
    Turn a caller-supplied pattern into a compiled str pattern.

    Args:
        pattern: a compiled ``re.Pattern`` over str, or a regex source string
        flags: ``re`` flags applied when ``pattern`` is a source string

    Returns:
        The compiled pattern

    Raises:
        InvalidPatternError: for bytes patterns, sources or flags that do
            not compile, and anything that is not a pattern at all
    """
    if isinstance(pattern, re.Pattern):
        if not isinstance(pattern.pattern, str):
            log.debug("Rejecting bytes pattern %r", pattern)
            raise InvalidPatternError("bytes patterns cannot scan text")
        return pattern

    if isinstance(pattern, str):
        try:
            return _compile(pattern, flags)
        except (re.error, TypeError, ValueError) as exc:
            log.debug("Rejecting uncompilable pattern %r: %s", pattern, exc)
            raise InvalidPatternError(f"invalid pattern {pattern!r}: {exc}") from exc

    log.debug("Rejecting non-pattern %r", pattern)
    raise InvalidPatternError(
        f"expected a regular expression, got {type(pattern).__name__}"
    )
