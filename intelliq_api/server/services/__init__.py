"""
Service layer of the IntelliQ API.

Thin wrappers around the external services the routers talk to:
- quiz_generator / prompts: LLM quiz generation (pydantic-ai)
- translator: AWS Translate
- auth: Supabase Auth
- rate_limiter: Redis backed request counting
- mailer: Resend
- room_codes: invite code generation
"""
