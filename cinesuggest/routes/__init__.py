"""
FastAPI routers for all endpoints.

Each module defines a router for one concern (HTML page, JSON API, health).
"""
