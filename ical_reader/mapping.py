from .constants import PROPERTY_TYPES, VALUE_PARAM


class DataTypeMapper:
    def __init__(self, mappings=None):
        self._types = dict(PROPERTY_TYPES)
        for name, tp in (mappings or {}).items():
            self.register(name, tp)

    def register(self, name, tp):
        self._types[name.upper()] = tp.upper()

    def resolve_type(self, name, context):
        # an explicit VALUE= on the line being decoded beats the table
        prop = context.peek() if context is not None else None
        if prop is not None and prop.name == name.upper():
            override = prop.param(VALUE_PARAM)
            if override is not None and override.value:
                return override.value.upper()
        return self._types.get(name.upper())
