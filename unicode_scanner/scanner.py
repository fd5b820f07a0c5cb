import logging
from typing import Optional, Union

from .describe import describe
from .errors import PositionOutOfRangeError, UnscanError
from .match import MatchRecord
from .patterns import ANY_CHAR, coerce_pattern

log = logging.getLogger(__name__)


class ScannerCore:
    """
    Codepoint-aware lexical scanner over a text buffer.

    The scanner keeps a scan pointer and walks forward through the text,
    matching regular expressions either exactly at the pointer (``scan``,
    ``check``, ``match``, ``skip``) or anywhere after it (``scan_until``,
    ``check_until``, ``exist``, ``skip_until``). Every attempt replaces the
    match register, which backs ``matched``, ``pre_match``, ``post_match``
    and ``scanner[n]``.

    Examples:
        >>> s = ScannerCore("This is an example string")
        >>> s.scan(r"\\w+")
        'This'
        >>> s.scan(r"\\w+") is None
        True
        >>> s.scan(r"\\s+")
        ' '
    """

    INSPECT_LENGTH = 5

    def __init__(self, text: Optional[str] = None, flags: int = 0):
        self._text = text
        self.flags = flags  # default re flags for string patterns
        self._pos = 0
        self._last: Optional[MatchRecord] = None
        self._previous: Optional[int] = None  # pointer before the last advancing match

    # Buffer

    @property
    def text(self) -> Optional[str]:
        """The text being scanned"""
        return self._text

    @text.setter
    def text(self, value: Optional[str]):
        """Replace the text and reset the scanner; None unbinds it"""
        self._text = value
        log.debug("Replaced scanner text (%d codepoints)", self._length())
        self._pos = 0
        self._forget_match()

    def concat(self, more: str) -> "ScannerCore":
        """Append to the text; the scan pointer and match register are untouched"""
        self._text = more if self._text is None else self._text + more
        return self

    __iadd__ = concat

    def _length(self) -> int:
        return len(self._text) if self._text is not None else 0

    # Scan pointer

    @property
    def pos(self) -> int:
        """Codepoint index of the scan pointer: 0 when reset, len(text) when terminated"""
        return self._pos

    @pos.setter
    def pos(self, n: int):
        """Move the scan pointer; negative values count back from the end"""
        length = self._length()
        if n < 0:
            n += length
        if n < 0 or n > length:
            log.debug("Rejecting scan pointer %d for text of length %d", n, length)
            raise PositionOutOfRangeError()
        self._pos = n

    pointer = pos

    def reset(self) -> "ScannerCore":
        """Move the scan pointer to the start and clear the match register"""
        log.debug("Resetting scanner")
        self._pos = 0
        self._forget_match()
        return self

    def terminate(self) -> "ScannerCore":
        """Move the scan pointer to the end and clear the match register"""
        log.debug("Terminating scanner at %d", self._length())
        self._pos = self._length()
        self._forget_match()
        return self

    clear = terminate

    def unscan(self) -> "ScannerCore":
        """Move the scan pointer back to where it was before the last advancing match.

        Only one position is remembered, and the last match attempt must have
        succeeded. Peeking matches keep the remembered position. It is lost as
        soon as a match fails, the scanner is reset or terminated, the text is
        replaced, or an unscan has been done.
        """
        if self._last is None or self._previous is None:
            log.debug("Unscan requested without a match record")
            raise UnscanError()
        self._pos = self._previous
        self._forget_match()
        return self

    # Position queries

    def eos(self) -> bool:
        """True if the scan pointer is at the end of the text"""
        return self._pos >= self._length()

    def beginning_of_line(self) -> bool:
        """True at the start of the text or right after a line feed"""
        if self._pos == 0:
            return True
        return self._text[self._pos - 1] == "\n"

    bol = beginning_of_line

    def peek(self, length: int) -> str:
        """Up to ``length`` codepoints after the scan pointer, without consuming"""
        if self.eos() or length <= 0:
            return ""
        return self._text[self._pos : self._pos + length]

    def rest(self) -> str:
        """Everything after the scan pointer; empty at end of text"""
        if self.eos():
            return ""
        return self._text[self._pos :]

    def rest_size(self) -> int:
        if self.eos():
            return 0
        return self._length() - self._pos

    # Matching

    def scan(self, pattern) -> Optional[str]:
        """Match at the scan pointer; advance past the match and return it"""
        return self._do_scan(pattern, True, True, True)

    def scan_until(self, pattern) -> Optional[str]:
        """Search ahead; advance past the match and return the text consumed"""
        return self._do_scan(pattern, True, True, False)

    def check(self, pattern) -> Optional[str]:
        """What ``scan`` would return, without advancing"""
        return self._do_scan(pattern, False, True, True)

    def check_until(self, pattern) -> Optional[str]:
        """What ``scan_until`` would return, without advancing"""
        return self._do_scan(pattern, False, True, False)

    def match(self, pattern) -> Optional[int]:
        """Length of a match at the scan pointer, without advancing"""
        return self._do_scan(pattern, False, False, True)

    def exist(self, pattern) -> Optional[int]:
        """Distance from the scan pointer to the end of the next match, without advancing"""
        return self._do_scan(pattern, False, False, False)

    def skip(self, pattern) -> Optional[int]:
        """Advance past a match at the scan pointer; return the distance advanced"""
        return self._do_scan(pattern, True, False, True)

    def skip_until(self, pattern) -> Optional[int]:
        """Advance past the next match anywhere ahead; return the distance advanced"""
        return self._do_scan(pattern, True, False, False)

    def scan_full(self, pattern, advance: bool, return_string: bool):
        """Anchored match with caller-chosen advance and result kind"""
        return self._do_scan(pattern, advance, return_string, True)

    def search_full(self, pattern, advance: bool, return_string: bool):
        """Unanchored search with caller-chosen advance and result kind"""
        return self._do_scan(pattern, advance, return_string, False)

    def getch(self) -> Optional[str]:
        """Consume one codepoint and return it"""
        return self._do_scan(ANY_CHAR, True, True, True)

    def _do_scan(
        self, pattern, advance: bool, return_string: bool, anchored: bool
    ) -> Union[str, int, None]:
        """
        Attempt one match from the scan pointer and update the match register.

        Args:
            pattern: compiled pattern or regex source
            advance: move the scan pointer past the match on success
            return_string: return the text from the scan pointer through the
                match end instead of its length
            anchored: the match must start exactly at the scan pointer

        Returns:
            The consumed text or its length on success, None otherwise
        """
        regex = coerce_pattern(pattern, self.flags)

        if self.eos():
            self._forget_match()
            return None

        # Match against the whole text so lookbehind and ^ see what precedes
        if anchored:
            found = regex.match(self._text, self._pos)
        else:
            found = regex.search(self._text, self._pos)
        if found is None:
            self._forget_match()
            return None

        record = MatchRecord(base=self._pos, match=found)
        self._last = record
        if advance:
            self._previous = self._pos
            self._pos += record.end

        if return_string:
            return self._text[record.base : record.base + record.end]
        return record.end

    def _forget_match(self):
        self._last = None
        self._previous = None

    # Match register

    def has_match(self) -> bool:
        """True iff the last match attempt succeeded"""
        return self._last is not None

    def matched(self) -> Optional[str]:
        if self._last is None:
            return None
        return self._last.group(0)

    def matched_size(self) -> Optional[int]:
        if self._last is None:
            return None
        start, end = self._last.span(0)
        return end - start

    def __getitem__(self, key: Union[int, str]) -> Optional[str]:
        """Group ``key`` (index or name) of the last match, None if absent"""
        if self._last is None:
            return None
        return self._last.group(key)

    def pre_match(self) -> Optional[str]:
        """Text before the last match"""
        if self._last is None:
            return None
        return self._text[: self._last.absolute_start]

    def post_match(self) -> Optional[str]:
        """Text after the last match"""
        if self._last is None:
            return None
        return self._text[self._last.absolute_end :]

    def __repr__(self) -> str:
        return describe(self)
