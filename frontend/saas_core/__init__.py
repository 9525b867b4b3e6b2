"""
SaaS Core — Shared client infrastructure.

Provides:
    - Backend service client (httpx)
    - Auth context (current user + loading flag)
    - Client-side document encryption (Fernet)
"""
