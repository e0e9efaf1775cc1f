"""
LineBASIC - output.py
Program output buffer

(c) 2024--2026 LineBASIC developers
This file is released under the GNU GPL version 3 or later.
"""

import io


class OutputBuffer(object):
    """Append-only text buffer, one record per line."""

    def __init__(self):
        """Initialise empty buffer."""
        self._stream = io.StringIO()

    def __len__(self):
        """Number of characters written."""
        return self._stream.tell()

    def write_line(self, text):
        """Append a record followed by a line break."""
        self._stream.write(u'%s\n' % (text,))

    def getvalue(self):
        """All records written since the last clear."""
        return self._stream.getvalue()

    def get_lines(self):
        """Records written since the last clear, as a list."""
        # each record ends in a line break, so the last item is always empty
        return self.getvalue().split(u'\n')[:-1]

    def clear(self):
        """Discard all records."""
        self._stream = io.StringIO()
