import logging

from .components import ComponentFactory
from .config import DeserializerConfig, load_config
from .context import SerializationContext
from .decoders import DecoderFactory
from .errors import ParseError, StreamConsumedError
from .mapping import DataTypeMapper
from .parsers import ComponentTreeAssembler, ContentLineParser, LineUnfolder, ValueDispatcher, iter_lines
from .types import DiagnosticState


class ComponentStream:
    """Lazy sequence of the top-level components of one parse.

    Each component is yielded as soon as its END line is read. The stream
    owns the diagnostics of its parse; after catching an error from it,
    ``last_line_message(str(e))`` tells which line was being parsed, or
    returns None when the error came from the source itself.
    A stream is read once, in order: iterating it again raises
    ``StreamConsumedError``.
    """

    def __init__(self, deserializer, source):
        self._deserializer = deserializer
        self._source = source
        self._components = None
        self.diagnostics = DiagnosticState()

    def __iter__(self):
        if self._components is not None:
            raise StreamConsumedError('ComponentStream can only be iterated once')
        self._components = self._run()
        return self

    def __next__(self):
        if self._components is None:
            self._components = self._run()
        return next(self._components)

    def last_line_message(self, message):
        return self.diagnostics.message(message)

    def _run(self):
        d = self._deserializer
        context = SerializationContext()
        assembler = ComponentTreeAssembler(d.component_factory)
        self.diagnostics.clear()

        last = None
        for n, logical in enumerate(LineUnfolder(iter_lines(self._source))):
            self.diagnostics.record(n, logical)
            try:
                content_line = ContentLineParser(logical.text).parse()
                prop = d.dispatcher.decode(content_line, context)
                finished = assembler.feed(prop)
            except ParseError as e:
                raise e.locate(self.diagnostics)
            # errors raised by the source while reading the next line are not located
            self.diagnostics.clear()
            last = (n, logical)
            if finished is not None:
                yield finished

        try:
            assembler.close()
        except ParseError as e:
            # an unclosed component is reported on the last line of the input
            self.diagnostics.record(*last)
            raise e.locate(self.diagnostics)
        self.diagnostics.clear()
        logging.debug('deserializer :: input fully parsed.')


class Deserializer:
    def __init__(self, type_mapper=None, decoder_factory=None, component_factory=None, **kwargs):
        self.config = DeserializerConfig(**kwargs)
        if self.config.log_level:
            logging.basicConfig(level=self.config.log_level)

        self.type_mapper = type_mapper or DataTypeMapper(self.config.type_mappings)
        self.decoder_factory = decoder_factory or DecoderFactory()
        self.component_factory = component_factory or ComponentFactory()
        self.dispatcher = ValueDispatcher(
            self.type_mapper, self.decoder_factory, self.config.default_type)

    @classmethod
    def from_config(cls, path, **kwargs):
        config = load_config(path)
        return cls(
            log_level=config.log_level,
            default_type=config.default_type,
            type_mappings=config.type_mappings,
            **kwargs)

    def deserialize(self, source) -> ComponentStream:
        return ComponentStream(self, source)


DEFAULT = Deserializer()


def deserialize(source):
    return DEFAULT.deserialize(source)


def loads(text):
    return list(DEFAULT.deserialize(text))
