"""
Application Layer Package

This package contains the application services. They hold no framework
code and are composed by the container in the Main layer.
"""

# Re-export submodules
from src.application import services

__all__ = ["services"]
