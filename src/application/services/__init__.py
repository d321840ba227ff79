"""
Services Package - Application Layer

Application services exposed through the dependency injection container.
"""

from .greeting_service import GreetingService

__all__ = ["GreetingService"]
