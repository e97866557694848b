BEGIN = 'BEGIN'
END = 'END'

# property value types, named after RFC 5545 VALUE= parameters
TEXT = 'TEXT'
INTEGER = 'INTEGER'
FLOAT = 'FLOAT'
BOOLEAN = 'BOOLEAN'
DATE = 'DATE'
DATE_TIME = 'DATE-TIME'
DURATION = 'DURATION'
PERIOD = 'PERIOD'
RECUR = 'RECUR'
URI = 'URI'
CAL_ADDRESS = 'CAL-ADDRESS'
UTC_OFFSET = 'UTC-OFFSET'
BINARY = 'BINARY'
GEO = 'GEO'

VALUE_PARAM = 'VALUE'
TZID_PARAM = 'TZID'

FOLD_CHARS = (' ', '\t')

DIAGNOSTIC_TEMPLATE = """Ical parse exception:
Line number: `{orig}` (`{num}` after line breaks removed)
Line: `{line}`

Original exception message: `{message}`"""

# default property -> value type table, everything else decodes as TEXT
PROPERTY_TYPES = {
    'PRIORITY': INTEGER,
    'SEQUENCE': INTEGER,
    'PERCENT-COMPLETE': INTEGER,
    'REPEAT': INTEGER,
    'DTSTART': DATE_TIME,
    'DTEND': DATE_TIME,
    'DUE': DATE_TIME,
    'DTSTAMP': DATE_TIME,
    'CREATED': DATE_TIME,
    'LAST-MODIFIED': DATE_TIME,
    'COMPLETED': DATE_TIME,
    'RECURRENCE-ID': DATE_TIME,
    'EXDATE': DATE_TIME,
    'RDATE': DATE_TIME,
    'URL': URI,
    'TZURL': URI,
    'ATTENDEE': CAL_ADDRESS,
    'ORGANIZER': CAL_ADDRESS,
    'GEO': GEO,
    'RRULE': RECUR,
    'EXRULE': RECUR,
    'TZOFFSETFROM': UTC_OFFSET,
    'TZOFFSETTO': UTC_OFFSET,
}
