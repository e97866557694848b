import logging

from ..constants import BEGIN, END
from ..errors import StructuralError


class ComponentTreeAssembler:
    """Stack machine building components out of decoded properties.

    ``feed()`` returns a component as soon as its END closes it at the
    document root, so callers can stream top-level components while the
    rest of the input is still unread.
    """

    def __init__(self, factory):
        self.factory = factory
        self.stack = []
        self.current = None

    def feed(self, prop):
        name = prop.name.upper()

        if name == BEGIN:
            self.stack.append(self.current)
            self.current = self.factory.build(_single_value(prop))
            self.factory.on_start(self.current)
            logging.debug(f"deserializer :: BEGIN:{self.current.name} (depth {len(self.stack)})")
            return None

        if name == END:
            found = _single_value(prop)
            if self.current is None:
                raise StructuralError(f"No component open, found 'END:{found}'")
            if found.upper() != self.current.name.upper():
                raise StructuralError(f"Expected 'END:{self.current.name}', found 'END:{found}'")
            self.factory.on_finish(self.current)
            finished = self.current
            self.current = self.stack.pop()
            logging.debug(f"deserializer :: END:{finished.name} (depth {len(self.stack)})")
            if self.current is None:
                return finished
            self.current.children.append(finished)
            return None

        if self.current is None:
            raise StructuralError(f"Expected 'BEGIN', found '{prop.name}'")
        self.current.properties.append(prop)
        return None

    def close(self):
        if self.current is not None:
            raise StructuralError(f"Unclosed component {self.current.name}")


def _single_value(prop):
    return str(prop.value) if prop.values else ''
