"""Core library constants."""

# Headers
CONTENT_TYPE_HEADER = "Content-Type"
DEFAULT_CONTENT_TYPE = "application/json; charset=utf-8"

# Envelope fields
DEFAULT_DATA_FIELD = "data"
DEFAULT_CODE_FIELD = "code"
PROGRAMMING_EXCUSE_FIELD = "programming-excuse"

# Serialization
INDENT_UNIT = "\t"
BODY_TERMINATOR = b"\n"
