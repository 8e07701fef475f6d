#!/usr/bin/env python3
"""Run script for todolist."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "todolist.api.app:create_app_from_env",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True
    )
