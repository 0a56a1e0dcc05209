"""Core package for cross-cutting library functionality.

- **config**: Centralized configuration management with environment support
- **constants**: Header names, default content type and envelope field names
- **exceptions**: Structured exception hierarchy with error codes
- **logging**: Loguru setup for host applications
- **types**: Type aliases for payloads and headers
"""
