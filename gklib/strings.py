"""String helpers: character translation, regex substitution, pruning,
comparisons and date/time conversion."""

import re
import string
import time
from collections.abc import Iterable, Mapping
from typing import Optional, Union

_TIME_FORMAT = "%m/%d/%Y %H:%M:%S"


class ReplacementError(ValueError):
    """Raised when a pattern or a replacement string cannot be used."""


def chr_replace(text: str, fromlist: str, tolist: str) -> str:
    """Replace every ``fromlist[k]`` in ``text`` with ``tolist[k]``.

    Characters of ``fromlist`` that have no counterpart in ``tolist`` are
    deleted. When a character occurs several times in ``fromlist`` its first
    position decides.
    """
    table: dict[str, str] = {}
    for k, ch in enumerate(fromlist):
        if ch not in table:
            table[ch] = tolist[k] if k < len(tolist) else ""
    return "".join(table.get(ch, ch) for ch in text)


def _expand(replacement: str, match: "re.Match[str]") -> str:
    out: list[str] = []
    chars = iter(replacement)
    for ch in chars:
        if ch == "\\":
            following = next(chars, None)
            if following is None:
                raise ReplacementError(
                    "Error in replacement string. Missing character following '\\'."
                )
            out.append(following)
        elif ch == "$":
            following = next(chars, None)
            if following is None:
                raise ReplacementError(
                    "Error in replacement string. "
                    "Missing subexpression number following '$'."
                )
            if following not in string.digits:
                raise ReplacementError("Error in captured subexpression specification.")
            group = int(following)
            if group > match.re.groups:
                raise ReplacementError(
                    f"Captured subexpression ${group} does not exist in the pattern."
                )
            out.append(match.group(group) or "")
        else:
            out.append(ch)
    return "".join(out)


def regex_replace(
    text: str, pattern: str, replacement: str, options: str = ""
) -> tuple[str, int]:
    """Substitute matches of ``pattern`` in ``text``, like Perl's ``s///``.

    In ``replacement``, ``$0`` .. ``$9`` refer to the whole match and to the
    captured groups, and a backslash makes the next character literal.
    ``options`` may hold ``"i"`` (ignore case) and ``"g"`` (replace every
    match rather than the first). Returns the new string and the number of
    substitutions made.
    """
    flags = re.IGNORECASE if "i" in options else 0
    global_replace = "g" in options
    try:
        compiled = re.compile(pattern, flags)
    except re.error as exc:
        raise ReplacementError(str(exc)) from exc

    parts: list[str] = []
    offset = 0
    count = 0
    while True:
        rest = text[offset:]
        match = compiled.search(rest)
        if match is None:
            parts.append(rest)
            break
        count += 1
        parts.append(rest[: match.start()])
        parts.append(_expand(replacement, match))
        offset += match.end()
        if not global_replace:
            parts.append(text[offset:])
            break
        if match.start() == match.end():
            # An empty match makes no progress; step over one character.
            if offset >= len(text):
                break
            parts.append(text[offset])
            offset += 1
    return "".join(parts), count


def tprune(text: str, rmlist: str) -> str:
    """Remove trailing characters that occur in ``rmlist``."""
    return text.rstrip(rmlist) if rmlist else text


def hprune(text: str, rmlist: str) -> str:
    """Remove leading characters that occur in ``rmlist``."""
    return text.lstrip(rmlist) if rmlist else text


def case_equal(s1: str, s2: str) -> bool:
    """Return True when the strings are equal ignoring case."""
    if len(s1) != len(s2):
        return False
    return all(a.lower() == b.lower() for a, b in zip(s1, s2))


def rcmp(s1: str, s2: str) -> int:
    """Compare two strings as if both were reversed.

    At the first differing character from the end, the difference of their
    code points is returned. Otherwise the shorter string compares lower
    (-1), the longer higher (1), and equal strings give 0.
    """
    for a, b in zip(reversed(s1), reversed(s2)):
        if a != b:
            return ord(a) - ord(b)
    if len(s1) < len(s2):
        return -1
    if len(s1) > len(s2):
        return 1
    return 0


def time2str(timestamp: float) -> str:
    """Format a timestamp as local ``mm/dd/yyyy hh:mm:ss``."""
    return time.strftime(_TIME_FORMAT, time.localtime(timestamp))


def str2time(text: str) -> int:
    """Parse a local ``mm/dd/yyyy hh:mm:ss`` string into a timestamp.

    Times before the epoch come back as 0. A string that does not follow
    the format raises ValueError.
    """
    parsed = time.strptime(text, _TIME_FORMAT)
    try:
        rtime = int(time.mktime(parsed))
    except (OverflowError, ValueError) as exc:
        if parsed.tm_year < 1970:
            return 0
        raise ValueError(f"time out of range: {text!r}") from exc
    return max(rtime, 0)


def get_string_id(
    strmap: Union[Mapping[str, int], Iterable[tuple[str, int]]], key: str
) -> Optional[int]:
    """Return the id whose name equals ``key`` ignoring case, or None.

    ``strmap`` is a mapping of names to ids or an iterable of (name, id)
    pairs; the first matching name wins.
    """
    pairs = strmap.items() if isinstance(strmap, Mapping) else strmap
    for name, ident in pairs:
        if case_equal(key, name):
            return ident
    return None