"""FastAPI host application.

Serves the NiceGUI pages and a health endpoint. All document, user and chat
data lives in the external backend; this app stores nothing.

Endpoints:
    - GET /health: Service health status
"""

from docdesk.api.app import create_app

__all__ = ["create_app"]
