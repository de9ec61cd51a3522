#!/usr/bin/env python3
"""
Startup script for the dice roll interaction service.
"""

import uvicorn
from app.config import get_settings

if __name__ == "__main__":
    settings = get_settings()

    print("Starting dice roll interaction service...")
    print(f"Host: {settings.host}")
    print(f"Port: {settings.port}")
    print(f"Debug: {settings.debug}")
    print(f"Sheet service: {settings.sheet_api_base}")
    print(f"Redis: {settings.redis_host or 'disabled (in-memory)'}")
    print(f"Log Level: {settings.log_level}")
    print("-" * 50)

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
