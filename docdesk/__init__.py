"""DocDesk - browser front end for a document-management and chat backend.

Combines NiceGUI for the browser interface, HTTPX for backend calls,
FastAPI as the hosting application, and Pydantic for data validation.

Components:
    - session: Session Store, preferences and the Access Gate
    - client: Backend HTTP client, authentication and chat services
    - sync: Document and user lists kept in step with the backend
    - api: Host application (health endpoint, NiceGUI mount point)
    - ui: Pages and widgets
    - models: Request/response schemas
"""

__version__ = "0.1.0"
