"""
API layer for the camera cloud backend.

Exposes the HTTP facade consumed by the presentation layer under /api
(health, cameras, devices). Every error body is {"error": message}.
"""
