import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class MatchRecord:
    """Capture record of one successful match, anchored to the cursor it ran from"""

    base: int  # scan pointer when the match was attempted
    match: re.Match  # engine result over the text as it was at match time

    def span(self, group: int = 0) -> Optional[Tuple[int, int]]:
        """Group bounds relative to ``base``; None if the group did not take part"""
        start, end = self.match.span(group)
        if start < 0:
            return None
        return start - self.base, end - self.base

    @property
    def start(self) -> int:
        """Start of the whole match relative to ``base``"""
        return self.match.start() - self.base

    @property
    def end(self) -> int:
        """End of the whole match relative to ``base``"""
        return self.match.end() - self.base

    @property
    def absolute_start(self) -> int:
        return self.match.start()

    @property
    def absolute_end(self) -> int:
        return self.match.end()

    def group(self, key: Union[int, str]) -> Optional[str]:
        """Captured text for a group index or name, None when there is no such group"""
        if isinstance(key, bool):
            return None
        if isinstance(key, int):
            if not 0 <= key <= self.match.re.groups:
                return None
        elif isinstance(key, str):
            if key not in self.match.re.groupindex:
                return None
        else:
            return None
        return self.match.group(key)
