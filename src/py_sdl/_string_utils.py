# -*- coding: utf-8 -*-
""" Work with strings """

import bisect
import re
import sys
import textwrap
from typing import Callable, Iterable, List, Sequence, Tuple, Union

LINE_SEPARATOR = re.compile(r"\r\n|[\n\r]")

# Only these count as indentation in block strings.
INDENT_CHARS = " \t"


def ensure_unicode(string: Union[str, bytes]) -> str:
    if isinstance(string, bytes):
        return string.decode("utf8")
    return string


def is_blank(string: str) -> bool:
    """
    Args:
        string (str): Input value

    Returns:
        bool: Whether the string only contains indentation characters

    >>> is_blank(" \\t ")
    True

    >>> is_blank(" a ")
    False
    """
    return not string.strip(INDENT_CHARS)


def parse_block_string(raw_string: str) -> str:
    """ Parse a raw string following GraphQL's BlockStringValue()
    http://facebook.github.io/graphql/draft/#BlockStringValue() static
    algorithm. Similar to Coffeescript's block string, Python's inspect.cleandoc
    or Ruby's strip_heredoc.

    Compared to Python's default behaviour, this does not remove leading
    whitespace from the first line and only considers ``\\n``, ``\\r\\n`` and
    ``\\r`` as line terminators.

    >>> parse_block_string("    first\\n    second\\n  third")
    '    first\\n  second\\nthird'
    """
    lines = LINE_SEPARATOR.split(raw_string)

    common_indent = sys.maxsize

    for line in lines[1:]:
        inner_len = len(line.lstrip(INDENT_CHARS))
        if inner_len:
            common_indent = min(common_indent, len(line) - inner_len)

    if common_indent < sys.maxsize:
        for i, line in enumerate(lines[1:]):
            lines[i + 1] = line[common_indent:]

    while lines and is_blank(lines[0]):
        lines.pop(0)

    while lines and is_blank(lines[-1]):
        lines.pop()

    return "\n".join(lines)


# Only used in tests
def dedent(raw_string: str) -> str:
    return textwrap.dedent(raw_string).lstrip()


def line_starts(body: str) -> List[int]:
    r""" Compute the 0-indexed offset at which every line of a string starts.

    >>> line_starts("ab\ncd\r\ne")
    [0, 3, 7]

    >>> line_starts("")
    [0]
    """
    return [0] + [m.end() for m in LINE_SEPARATOR.finditer(body)]


def offset_to_loc(starts: Sequence[int], position: int) -> Tuple[int, int]:
    """ Same as :func:`index_to_loc` using precomputed line starts.

    >>> offset_to_loc([0, 3, 7], 4)
    (2, 2)
    """
    line = bisect.bisect_right(starts, position)
    return (line, position - starts[line - 1] + 1)


def index_to_loc(body: str, position: int) -> Tuple[int, int]:
    r""" Get the (line number, column number) tuple from a zero-indexed offset.

    Args:
        body (str): Source string
        position (int): 0-indexed position of the character

    Returns:
        Tuple[int, int]: (line number, column number)

    Raises:
        :py:class:`IndexError`: if ``position`` is out of bounds

    >>> index_to_loc("ab\ncd\ne", 0)
    (1, 1)

    >>> index_to_loc("ab\ncd\ne", 3)
    (2, 1)

    >>> index_to_loc("", 0)
    (1, 1)

    >>> index_to_loc("{", 1)
    (1, 2)

    >>> index_to_loc("", 42)
    Traceback (most recent call last):
        ...
    IndexError: 42
    """
    if position > len(body) or position < 0:
        raise IndexError(position)

    return offset_to_loc(line_starts(body), position)


def highlight_location(body: str, position: int, delta: int = 2) -> str:
    """ Nicely format a highlited view of a position into a source string.

    Args:
        body (str): Source string
        position (int): 0-indexed position of the character
        delta (int): How many lines around the position should this conserve

    Returns:
        str: Formatted view
    """
    line, col = index_to_loc(body, position)
    line_index = line - 1
    lines = LINE_SEPARATOR.split(body)
    min_line = max(0, line_index - delta)
    max_line = min(line_index + delta, len(lines) - 1)
    pad_len = len(str(max_line + 1))

    def numbered(index: int) -> str:
        return "  %s:%s" % (str(index + 1).zfill(pad_len), lines[index])

    output = ["(%d:%d):" % (line, col)]
    output.extend(numbered(i) for i in range(min_line, line_index + 1))
    output.append(" " * (2 + pad_len + col) + "^")
    output.extend(numbered(i) for i in range(line_index + 1, max_line + 1))
    return "\n".join(output) + "\n"


def levenshtein(s1: str, s2: str) -> int:
    """ Compute the Levenshtein edit distance between 2 strings.

    Args:
        s1 (str): First string
        s2 (str): Second string

    Returns:
        int: Computed edit distance

    >>> levenshtein("type", "typ")
    1
    """
    if len(s1) < len(s2):
        return levenshtein(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def infer_suggestions(
    candidate: str,
    options: Iterable[str],
    distance: Callable[[str, str], int] = levenshtein,
) -> List[str]:
    """ Extract the most similar entries to an input string given multiple
    options and a distance function.

    Args:
        candidate (str): Input string
        options (Iterator[str]): Possible options
        distance (callable):
            Distance function, must have the signature ``(s1, s2) -> int``
            where the more similar the inputs are, the lower the result is.

    Returns:
        Most similar options sorted by similarity (most similar to least similar)

    >>> infer_suggestions("inteface", ["input", "interface", "union"])
    ['interface']
    """
    distances = []
    half = len(candidate) / 2
    for option in options:
        dist = distance(candidate, option)
        threshold = max(half, len(option) / 2, 1)
        if dist <= threshold:
            distances.append((option, dist))
    return [opt for opt, _ in sorted(distances, key=lambda s: (s[1], s[0]))]


def quoted_options_list(options: Sequence[str]) -> str:
    """ Quote a list of possible strings.

    Args:
        options (Iterator[str]): Possible options

    Returns:
        str: Quoted options

    >>> quoted_options_list([])
    ''

    >>> quoted_options_list(['foo'])
    '"foo"'

    >>> quoted_options_list(['foo', 'bar'])
    '"foo" or "bar"'

    >>> quoted_options_list(['foo', 'bar', 'baz'])
    '"foo", "bar" or "baz"'
    """
    if not options:
        return ""

    if len(options) == 1:
        return '"%s"' % options[0]

    return "%s or %s" % (
        ", ".join(('"%s"' % option for option in options[:-1])),
        '"%s"' % options[-1],
    )
