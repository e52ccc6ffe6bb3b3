"""
API layer for the Auth Service.

Exposes HTTP endpoints under /api/v1/auth (register, login, me).
"""
