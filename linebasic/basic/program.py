"""
LineBASIC - program.py
Program buffer and line label resolution

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

import logging
import re

from .values import trim


# comment marker; everything from here to the end of the line is ignored
COMMENT = u'//'

# leading line number
_LABEL = re.compile(u'^[0-9]+')


def strip_line(line):
    """Remove comment and line number label from a program line."""
    comment_pos = line.find(COMMENT)
    if comment_pos != -1:
        line = trim(line[:comment_pos])
    return trim(_LABEL.sub(u'', line))


def get_label(line):
    """Line number label of a program line, or empty."""
    match = _LABEL.match(line)
    return match.group() if match else u''


###############################################################################
# label matching strategies

def match_prefix(line, target):
    """Line matches if its text starts with the target (target 1 matches line 10)."""
    return line.startswith(target)


def match_exact(line, target):
    """Line matches if its line number label equals the target."""
    return bool(target) and get_label(line) == target


LABEL_MATCHERS = {
    u'prefix': match_prefix,
    u'exact': match_exact,
}


def get_matcher(label_match):
    """Retrieve a label matching strategy by name, or pass through a callable."""
    if callable(label_match):
        return label_match
    try:
        return LABEL_MATCHERS[label_match]
    except KeyError:
        raise ValueError(
            u'Label matching must be one of (%s), not `%s`'
            % (u', '.join(sorted(LABEL_MATCHERS)), label_match)
        )


###############################################################################

class Program(object):
    """BASIC program: ordered, trimmed source lines."""

    def __init__(self, label_match=u'prefix'):
        """Initialise empty program."""
        self._match = get_matcher(label_match)
        self.erase()

    def __repr__(self):
        """Program listing with storage indices (for debugging)."""
        return u'\n'.join(u'[%03d] %s' % (_i, _line) for _i, _line in enumerate(self._lines))

    def __len__(self):
        """Number of lines."""
        return len(self._lines)

    def __getitem__(self, index):
        """Line at storage index."""
        return self._lines[index]

    def __iter__(self):
        """Iterate over lines."""
        return iter(self._lines)

    def erase(self):
        """Erase the program."""
        self._lines = ()

    def load(self, text):
        """Replace the program with the lines of a source text."""
        logging.debug(u'Loading program')
        segments = text.split(u'\n')
        # trailing empty segments do not make lines
        while segments and not segments[-1]:
            segments.pop()
        self._lines = tuple(trim(_segment) for _segment in segments)
        for line in self._lines:
            logging.debug(u'Loaded line: %s', line)

    def find_line(self, target):
        """Storage index of the first line matching a target label, or None."""
        for index, line in enumerate(self._lines):
            if self._match(line, target):
                logging.debug(u'Found target line %s at index %d', target, index)
                return index
        logging.debug(u'Target line %s not found', target)
        return None
