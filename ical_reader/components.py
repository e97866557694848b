import logging

from .types import DataClass


class Component(DataClass):
    name: str
    properties: list
    children: list

    # components are nodes of a tree, they compare and hash by identity
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __init__(self, name):
        super().__init__(name=name, properties=[], children=[])

    # lifecycle hooks, called once each around the BEGIN/END span
    def on_deserializing(self): pass
    def on_deserialized(self): pass

    def get(self, name):
        for p in self.properties:
            if p.name == name.upper():
                return p
        return None

    def get_all(self, name):
        return [p for p in self.properties if p.name == name.upper()]

    def value(self, name, default=None):
        p = self.get(name)
        return p.value if p is not None and p.values else default

    def walk(self, name=None):
        """Yield this component and all its descendants, depth-first.

        ``name`` filters on the component name (case-insensitive).
        """
        stack = [self]
        while stack:
            c = stack.pop()
            if name is None or c.name.upper() == name.upper():
                yield c
            stack.extend(reversed(c.children))

    def _children_named(self, name):
        return [c for c in self.children if c.name.upper() == name]


class Calendar(Component):
    @property
    def events(self): return self._children_named('VEVENT')

    @property
    def todos(self): return self._children_named('VTODO')

    @property
    def journals(self): return self._children_named('VJOURNAL')

    @property
    def timezones(self): return self._children_named('VTIMEZONE')

    def on_deserialized(self):
        logging.debug(f"components :: calendar finished ({len(self.events)} events).")


class Event(Component):
    @property
    def summary(self): return self.value('SUMMARY')

    @property
    def alarms(self): return self._children_named('VALARM')


class Todo(Event): pass
class Journal(Component): pass
class FreeBusy(Component): pass
class Alarm(Component): pass
class Standard(Component): pass
class Daylight(Component): pass


class TimeZone(Component):
    @property
    def tzid(self): return self.value('TZID')


class ComponentFactory:
    KINDS = {
        'VCALENDAR': Calendar,
        'VEVENT': Event,
        'VTODO': Todo,
        'VJOURNAL': Journal,
        'VFREEBUSY': FreeBusy,
        'VTIMEZONE': TimeZone,
        'VALARM': Alarm,
        'STANDARD': Standard,
        'DAYLIGHT': Daylight,
    }

    def __init__(self, kinds=None):
        self._kinds = dict(self.KINDS)
        self._kinds.update(kinds or {})

    def register(self, name, cls):
        self._kinds[name.upper()] = cls

    def build(self, name):
        # unknown (X-, IANA) components get the generic kind
        return self._kinds.get(name.upper(), Component)(name)

    def on_start(self, node):
        node.on_deserializing()

    def on_finish(self, node):
        node.on_deserialized()
