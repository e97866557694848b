from datetime import date, datetime
from enum import Enum

from .constants import DIAGNOSTIC_TEMPLATE


class DataClass:
    def __init__(self, **kwargs):
        for i in kwargs:
            setattr(self, i, kwargs[i])

    def __repr__(self):
        return f"{self.__class__.__name__}({', '.join([f'{k} = {v.__repr__()}' for k,v in self.__dict__.items()])})"

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def json(c):
        if isinstance(c, DataClass):
            return DataClass.json(c.__dict__)
        elif isinstance(c, (list, tuple)):
            return [DataClass.json(_) for _ in c]
        elif isinstance(c, dict):
            return {k: DataClass.json(v) for k,v in c.items()}
        elif isinstance(c, (datetime, date)):
            return c.isoformat()
        elif isinstance(c, Enum):
            return c._name_
        else:
            return c


class LogicalLine(DataClass):
    text: str
    line_number: int  # physical line the logical line started on

    def __init__(self, text, line_number):
        super().__init__(text=text, line_number=line_number)


class Parameter(DataClass):
    name: str
    values: list

    def __init__(self, name, values=None):
        super().__init__(name=name, values=list(values or []))

    @property
    def value(self):
        return self.values[0] if self.values else None


class ContentLine(DataClass):
    """A grammar-matched line whose value has not been decoded yet."""
    name: str
    parameters: list
    value: str

    def __init__(self, name, parameters, value):
        super().__init__(name=name, parameters=parameters, value=value)


class Property(DataClass):
    name: str
    parameters: list
    values: list

    def __init__(self, name, parameters=None, values=None):
        super().__init__(name=name, parameters=list(parameters or []), values=list(values or []))

    @property
    def value(self):
        return self.values[0] if self.values else None

    def param(self, name):
        # first occurrence wins, parameter names are case-insensitive
        for p in self.parameters:
            if p.name.upper() == name.upper():
                return p
        return None


class DiagnosticState(DataClass):
    line_number: int
    original_line_number: int
    line: str

    def __init__(self):
        super().__init__(line_number=-1, original_line_number=-1, line=None)

    def record(self, n, logical):
        self.line_number = n
        self.original_line_number = logical.line_number
        self.line = logical.text

    def clear(self):
        self.line_number = -1
        self.original_line_number = -1
        self.line = None

    def message(self, original_message):
        if self.line_number < 0:
            return None
        return DIAGNOSTIC_TEMPLATE.format(
            orig=self.original_line_number, num=self.line_number,
            line=self.line, message=original_message)
