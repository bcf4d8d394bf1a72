"""
Application Modules.

- core/: Configuration, logging, exceptions
- schemas/: Pydantic models for API payloads
- console/: Interactive console (httpx + Rich)
"""
