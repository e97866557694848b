from ..constants import BEGIN, END, TEXT
from ..types import Property


class ValueDispatcher:
    def __init__(self, type_mapper, decoder_factory, default_type=TEXT):
        self.type_mapper = type_mapper
        self.decoder_factory = decoder_factory
        self.default_type = default_type

    def decode(self, content_line, context) -> Property:
        prop = Property(content_line.name, content_line.parameters)

        # the type mapper and the decoder both look at the property being
        # decoded through the context, so it is pushed before either runs
        with context.decoding(prop):
            tp = self._resolve_type(prop, context)
            decoder = self.decoder_factory.build(tp, context)
            value = decoder.decode(content_line.value)

        if _is_string_list(value):
            prop.values.extend(value)
        else:
            prop.values.append(value)
        return prop

    def _resolve_type(self, prop, context):
        # component names are always text, whatever the default type is
        if prop.name in (BEGIN, END):
            return TEXT
        return self.type_mapper.resolve_type(prop.name, context) or self.default_type


def _is_string_list(value):
    return isinstance(value, (list, tuple)) and all(isinstance(_, str) for _ in value)
