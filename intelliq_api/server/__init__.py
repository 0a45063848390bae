"""
IntelliQ Server Package.

This package contains the web server implementation for the IntelliQ API.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration settings and constants.
    exception_handlers: Mapping of exceptions to JSON error responses.
    middleware: Request logging and timing.
    services: Orchestration over external services (LLM, translation, auth, email).
"""
