"""Integration tests for the client services working against a backend.

Coverage:
    - Login, registration and session persistence
    - Document listing, upload, rename, delete, Drive import
    - User administration and profile edits
    - Session expiry (401) at every call site
    - Host application health endpoint

The backend is the FastAPI app in tests/fake_backend.py, reached through
httpx.ASGITransport.
"""
