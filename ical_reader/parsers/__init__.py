from .unfold import LineUnfolder, iter_lines
from .content_line import ContentLineParser, parse_content_line
from .value import ValueDispatcher
from .tree import ComponentTreeAssembler
