from .constants import DIAGNOSTIC_TEMPLATE


class ParseError(Exception):
    def __init__(self, s):
        super().__init__(s)
        self.s = s
        # filled by the deserializer when the error happens inside the line loop
        self.line_number = None
        self.original_line_number = None
        self.line = None

    def locate(self, diagnostics):
        self.line_number = diagnostics.line_number
        self.original_line_number = diagnostics.original_line_number
        self.line = diagnostics.line
        return self

    def describe(self):
        if self.line_number is None or self.line_number < 0:
            return self.s
        return DIAGNOSTIC_TEMPLATE.format(
            orig=self.original_line_number, num=self.line_number,
            line=self.line, message=self.s)

    def __repr__(self): return f"{self.__class__.__name__}({self.s!r})"


class GrammarError(ParseError):
    def __init__(self, line):
        super().__init__(f"Could not parse line: '{line}'")
        self.line = line


class StructuralError(ParseError): pass
class StreamConsumedError(ParseError): pass
