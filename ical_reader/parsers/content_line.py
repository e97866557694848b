import re

from ..errors import GrammarError
from ..types import ContentLine, Parameter

# name          = iana-token / x-name, plus "_" for producers that use it
# paramtext     = any char except CONTROL, DQUOTE, ";", ":", ","
# quoted-string = DQUOTE any char except CONTROL and DQUOTE DQUOTE
# value         = any char except CONTROL, 0x09-0x0D are let through
IDENTIFIER = re.compile(r'[-A-Za-z0-9_]+')
PARAM_TEXT = re.compile(r'[^\x00-\x08\x0A-\x1F\x7F";:,]*')
QUOTED_TEXT = re.compile(r'"([^\x00-\x08\x0A-\x1F\x7F"]*)"')
VALUE = re.compile(r'[^\x00-\x08\x0E-\x1F\x7F]*')


class ContentLineParser:
    """Matches one unfolded line against the content-line grammar.

        contentline = name *(";" param ) ":" value
        param       = param-name "=" param-value *("," param-value)

    The line is walked left to right with anchored patterns. Every
    ``param-name`` opens a new ``Parameter`` that collects the values up to
    the next name, so a parameter repeated on one line stays two entries.
    """

    def __init__(self, line: str):
        self._line = line
        self._pos = 0
        self.name = None
        self.parameters = []
        self.value = None

    def parse(self) -> ContentLine:
        self.name = self._expect(IDENTIFIER).upper()
        while self._peek() == ';':
            self._pos += 1
            self.parameters.append(self._parse_param())
        if self._peek() != ':':
            raise GrammarError(self._line)
        self._pos += 1
        self.value = self._expect(VALUE)
        if self._pos != len(self._line):
            raise GrammarError(self._line)
        return ContentLine(self.name, self.parameters, self.value)

    def _parse_param(self):
        param = Parameter(self._expect(IDENTIFIER))
        if self._peek() != '=':
            raise GrammarError(self._line)
        self._pos += 1
        param.values.append(self._parse_param_value())
        while self._peek() == ',':
            self._pos += 1
            param.values.append(self._parse_param_value())
        return param

    def _parse_param_value(self):
        if self._peek() == '"':
            m = QUOTED_TEXT.match(self._line, self._pos)
            if m is None:
                raise GrammarError(self._line)
            self._pos = m.end()
            return m.group(1)
        return self._expect(PARAM_TEXT)

    def _expect(self, pattern):
        m = pattern.match(self._line, self._pos)
        if m is None:
            raise GrammarError(self._line)
        self._pos = m.end()
        return m.group(0)

    def _peek(self):
        return self._line[self._pos] if self._pos < len(self._line) else None


def parse_content_line(line):
    return ContentLineParser(line).parse()
