from .constants import *
from .types import *
from .errors import *
from .context import SerializationContext
from .components import *
from .mapping import DataTypeMapper
from .decoders import *
from .config import DeserializerConfig, load_config
from .parsers import LineUnfolder, ContentLineParser, ValueDispatcher, ComponentTreeAssembler, parse_content_line
from .deserializer import ComponentStream, Deserializer, DEFAULT, deserialize, loads
from .ics import *
