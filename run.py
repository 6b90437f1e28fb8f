#!/usr/bin/env python3
"""
Run script for The Truth Machine
"""
import uvicorn

from truth_machine.config.settings import Settings

if __name__ == "__main__":
    settings = Settings()
    uvicorn.run(
        "truth_machine.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
