"""Greetings API service."""
