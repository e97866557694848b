# a simple entry point for callers that just want the whole calendar
# as nested dicts, e.g. to dump it as json
from .deserializer import DEFAULT
from .errors import StructuralError


class ICSCalendar:
    def __init__(self, raw, deserializer=None):
        self.components = list((deserializer or DEFAULT).deserialize(raw))
        if not self.components:
            raise StructuralError('No component found')
        self.calendar = self.components[0]
        self.data = self._to_dict(self.calendar)

    def _to_dict(self, component):
        data = {'@type': component.name}
        for p in component.properties:
            # repeated properties: the last one wins
            data[p.name] = p.value if len(p.values) == 1 else p.values
        for c in component.children:
            if c.name not in data:
                data[c.name] = []
            data[c.name].append(self._to_dict(c))
        return data
