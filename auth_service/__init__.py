"""
Auth Service Application: root package.

This package contains the FastAPI app entry point (main.py), API routes,
the user registration domain, application use cases and the infrastructure
(MongoDB persistence, JWT signing) behind them.
"""
