"""Presentation layer: HTTP routers and DTOs."""
