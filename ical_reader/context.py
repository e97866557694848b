from contextlib import contextmanager


class SerializationContext:
    """State shared between the dispatcher and the decoders of one parse.

    Decoders look at ``peek()`` to find the property currently being
    decoded, e.g. to read its ``TZID`` or ``VALUE`` parameter.
    """

    def __init__(self):
        self._properties = []

    def push(self, prop):
        self._properties.append(prop)

    def pop(self):
        return self._properties.pop() if self._properties else None

    def peek(self):
        return self._properties[-1] if self._properties else None

    def __len__(self):
        return len(self._properties)

    @contextmanager
    def decoding(self, prop):
        self.push(prop)
        try:
            yield prop
        finally:
            self.pop()
