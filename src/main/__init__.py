"""
Main module - Main/Composition Root Layer

This module is the entry point of the application, orchestrating
the initialization of the other layers:

- Loading the settings for the active profile
- Configuring services (Composition Root)
- Initializing the framework (FastAPI) and the server (uvicorn)
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
