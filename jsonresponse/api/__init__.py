"""FastAPI integration.

- **responses**: ``EnvelopeResponse``, a response class running content
  through the envelope pipeline
- **main**: demo application factory exercising the helpers end to end
"""

from jsonresponse.api.responses import EnvelopeResponse

__all__ = ["EnvelopeResponse"]
