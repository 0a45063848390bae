"""IntelliQ API.

Backend service for the IntelliQ quiz product.

High-level architecture
-----------------------

The service is a set of independent route handlers. Each handler validates
its input, calls at most a few external services and shapes a JSON response:

- ``intelliq_api.server``:

  - FastAPI application, versioned routers and exception handlers.
  - Service layer wrapping the external SaaS collaborators: the LLM used to
    generate quizzes (through pydantic-ai), AWS Translate, Supabase auth,
    Redis-backed rate limiting and Resend email.

- ``intelliq_api.core``:

  - Logging and Logfire monitoring configuration.
  - SQLModel entities and async repositories for rooms, quizzes and usage
    rows.
  - Request/response models for the public API.
"""
