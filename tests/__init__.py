"""Test package for DocDesk.

Structure:
    - unit/: Session, gate, client and sync logic against mocked transports
    - integration/: Client services against an in-process fake backend
    - fake_backend.py: FastAPI stand-in for the document backend

No network access is needed; every backend call goes through an httpx
transport supplied by the fixtures.
"""
