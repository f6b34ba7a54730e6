"""
Camera Cloud Backend - root package.

This package contains the FastAPI app entry point (main.py), API routes,
use cases, domain models, and the signed device cloud clients
(infrastructure.external) the routes are built on.
"""
