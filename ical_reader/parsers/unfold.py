from ..constants import FOLD_CHARS
from ..errors import StreamConsumedError
from ..types import LogicalLine


def iter_lines(source):
    # a str is split on "\n" only, any other iterable (file, StringIO, list)
    # is read lazily; either way one "\n" or "\r\n" terminator is dropped
    if isinstance(source, str):
        source = source.split('\n')
    for line in source:
        if line.endswith('\n'):
            line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
        yield line


class LineUnfolder:
    """Joins folded physical lines back into logical lines.

    Iterating yields ``LogicalLine`` objects lazily; the physical line each
    one started on is also appended to ``line_numbers`` as it is yielded.
    The unfolder reads its source once: iterating it a second time raises
    ``StreamConsumedError``.
    """

    def __init__(self, lines):
        self._lines = lines
        self._consumed = False
        self.line_numbers = []

    def __iter__(self):
        if self._consumed:
            raise StreamConsumedError('LineUnfolder can only be iterated once')
        self._consumed = True
        return self._unfold()

    def _unfold(self):
        buff = []
        start = None
        i = -1
        for line in self._lines:
            i += 1
            # blank lines are neither content nor line terminators
            if not line:
                continue

            # a folded line before any content has nothing to continue: it is
            # kept whole, leading whitespace included, so the grammar reports it
            if line[0] in FOLD_CHARS and start is not None:
                buff.append(line[1:])
                continue

            if buff:
                yield self._flush(buff, start)
            start = i
            buff = [line]

        if buff:
            yield self._flush(buff, start)

    def _flush(self, buff, start):
        self.line_numbers.append(start)
        return LogicalLine(''.join(buff), start)
