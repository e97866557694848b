import logging
import dateutil.parser
import dateutil.tz

from .constants import *

_TEXT_ESCAPES = {'\\': '\\', ';': ';', ',': ',', 'n': '\n', 'N': '\n'}


class Decoder:
    """Turns the raw text of one property value into python values.

    A decoder returning a list or tuple of strings produces one property
    value per string, anything else (a list of dates included) is stored as
    the single value of the property.
    """
    def __init__(self, context):
        self.context = context

    @property
    def prop(self):
        return self.context.peek() if self.context is not None else None

    def decode(self, text):
        raise NotImplementedError


class RawDecoder(Decoder):
    def decode(self, text):
        return text


class TextDecoder(Decoder):
    # splits on unescaped commas and resolves backslash escapes
    def decode(self, text):
        values = []
        buff = []
        escaped = False
        for c in text:
            if escaped:
                buff.append(_TEXT_ESCAPES.get(c, '\\' + c))
                escaped = False
            elif c == '\\':
                escaped = True
            elif c == ',':
                values.append(''.join(buff))
                buff = []
            else:
                buff.append(c)
        if escaped:
            buff.append('\\')
        values.append(''.join(buff))
        return values


class IntegerDecoder(Decoder):
    def decode(self, text):
        return int(text)


class FloatDecoder(Decoder):
    def decode(self, text):
        return float(text)


class BooleanDecoder(Decoder):
    def decode(self, text):
        v = text.strip().upper()
        if v == 'TRUE': return True
        if v == 'FALSE': return False
        raise ValueError(f"Invalid boolean: '{text}'")


class GeoDecoder(Decoder):
    def decode(self, text):
        parts = text.split(';')
        if len(parts) != 2:
            raise ValueError(f"Invalid geo position: '{text}'")
        return float(parts[0]), float(parts[1])


class DateDecoder(Decoder):
    def decode(self, text):
        dates = [self._parse(_) for _ in text.split(',')]
        return dates if len(dates) > 1 else dates[0]

    def _parse(self, s):
        if len(s) != 8 or not s.isdigit():
            raise ValueError(f"Invalid date: '{s}'")
        return dateutil.parser.isoparse(s).date()


class DateTimeDecoder(DateDecoder):
    def _parse(self, s):
        # some producers put plain dates in date-time properties without VALUE=DATE
        if len(s) == 8 and s.isdigit():
            return super()._parse(s)
        if 'T' not in s:
            raise ValueError(f"Invalid date-time: '{s}'")
        dt = dateutil.parser.isoparse(s)
        if dt.tzinfo is None:
            tzid = self.prop.param(TZID_PARAM) if self.prop else None
            if tzid is not None and tzid.value:
                tz = dateutil.tz.gettz(tzid.value)
                if tz is None:
                    logging.debug(f"decoders :: unknown TZID '{tzid.value}', keeping naive date-time.")
                else:
                    dt = dt.replace(tzinfo=tz)
        return dt


class DecoderFactory:
    DECODERS = {
        TEXT: TextDecoder,
        INTEGER: IntegerDecoder,
        FLOAT: FloatDecoder,
        BOOLEAN: BooleanDecoder,
        DATE: DateDecoder,
        DATE_TIME: DateTimeDecoder,
        GEO: GeoDecoder,
        URI: RawDecoder,
        CAL_ADDRESS: RawDecoder,
    }

    def __init__(self, decoders=None):
        self._decoders = dict(self.DECODERS)
        self._decoders.update(decoders or {})

    def register(self, tp, cls):
        self._decoders[tp.upper()] = cls

    def build(self, tp, context):
        # value types without a decoder keep their raw text
        return self._decoders.get(tp.upper(), RawDecoder)(context)
