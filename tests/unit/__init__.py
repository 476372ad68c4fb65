"""Unit tests for individual components in isolation.

Coverage:
    - session/: Session Store, preferences and Access Gate
    - client/: Bearer handling, 401 handling, error mapping, chat answers
    - sync/: Ordering, stale-response rejection, re-fetch after mutation

Backend responses come from httpx.MockTransport handlers.
"""
