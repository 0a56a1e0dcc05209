"""Type aliases for dynamic data structures used across the library.

This module centralizes type definitions for data that cannot be statically
typed, providing clear semantic meaning for response payloads and headers.

All payload types defined here are expected to be JSON-serializable, since
they end up on the wire as the response body.
"""

from typing import Any

# Arbitrary response payload, must be serializable by orjson
type Payload = Any

# Response headers, name -> value
type Headers = dict[str, str]

# Context dictionary for error details and debugging information
type ErrorContext = dict[str, Any]
