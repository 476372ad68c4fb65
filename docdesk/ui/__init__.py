"""NiceGUI interface - thin presentation layer over the session and sync layer.

Responsibilities:
    - Login and registration pages
    - Document list with upload, rename and delete
    - Per-document chat with the backend assistant
    - Profile, dark mode and language settings
    - Admin user management

Every page builds its own AppContext over the browser's storage. Pages hold
no business logic; failures surface as notifications.
"""
