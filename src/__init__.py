"""
Source Code Root Module

This module serves as the root for the source code of the application.

Layer Structure:
- Application: Application services
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
