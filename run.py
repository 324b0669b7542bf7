#!/usr/bin/env python3
"""
Run script for the Greetings API
"""
import uvicorn

from greeting_api.config.settings import settings
from greeting_api.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, reload=settings.debug)
