"""Interface strings in the supported languages."""

TEXTS: dict[str, dict[str, str]] = {
    "es": {
        "app_title": "DocDesk",
        "documents": "Documentos",
        "chats": "Chat",
        "settings": "Configuración",
        "users": "Usuarios",
        "logout": "Cerrar sesión",
        "login": "Iniciar sesión",
        "register": "Crear cuenta",
        "email": "Correo",
        "password": "Contraseña",
        "username": "Usuario",
        "welcome": "Hola {name}!",
        "upload": "Subir documento",
        "drive_import": "Importar de Drive",
        "rename": "Renombrar",
        "delete": "Eliminar",
        "confirm_delete": "¿Eliminar \"{name}\"?",
        "cancel": "Cancelar",
        "save": "Guardar",
        "no_documents": "Aún no hay documentos",
        "ask_placeholder": "Pregunta sobre el documento...",
        "dark_mode": "Modo oscuro",
        "language": "Idioma",
        "profile_saved": "Perfil actualizado",
        "registered": "Cuenta creada. Inicia sesión.",
        "role": "Rol",
        "create_user": "Nuevo usuario",
        "dashboard": "Panel",
        "documents_per_user": "Documentos por usuario",
        "total_documents": "Total de documentos",
        "recent_documents": "Documentos recientes",
        "no_data": "No hay datos disponibles",
        "analyze": "Analizar con IA",
        "analyzing": "Analizando documento...",
        "analyze_hint": "Pulsa \"Analizar con IA\" para obtener el resumen del documento.",
        "analysis_done": "Análisis completado",
        "no_preview": "No hay documento disponible",
    },
    "en": {
        "app_title": "DocDesk",
        "documents": "Documents",
        "chats": "Chat",
        "settings": "Settings",
        "users": "Users",
        "logout": "Sign out",
        "login": "Sign in",
        "register": "Create account",
        "email": "Email",
        "password": "Password",
        "username": "Username",
        "welcome": "Hello {name}!",
        "upload": "Upload document",
        "drive_import": "Import from Drive",
        "rename": "Rename",
        "delete": "Delete",
        "confirm_delete": "Delete \"{name}\"?",
        "cancel": "Cancel",
        "save": "Save",
        "no_documents": "No documents yet",
        "ask_placeholder": "Ask about the document...",
        "dark_mode": "Dark mode",
        "language": "Language",
        "profile_saved": "Profile updated",
        "registered": "Account created. Please sign in.",
        "role": "Role",
        "create_user": "New user",
        "dashboard": "Dashboard",
        "documents_per_user": "Documents per user",
        "total_documents": "Total documents",
        "recent_documents": "Recent documents",
        "no_data": "No data available",
        "analyze": "Analyze with AI",
        "analyzing": "Analyzing document...",
        "analyze_hint": "Press \"Analyze with AI\" to get a summary of the document.",
        "analysis_done": "Analysis complete",
        "no_preview": "No document available",
    },
}


def translate(key: str, language: str, **values: str) -> str:
    """Look up ``key`` for ``language``, falling back to the key itself."""
    text = TEXTS.get(language, TEXTS["es"]).get(key, key)
    return text.format(**values) if values else text
