#!/usr/bin/env python
"""Script to run the Taskboard API server."""
import uvicorn

from taskboard.config import HOST, PORT, RELOAD

if __name__ == "__main__":
    uvicorn.run(
        "taskboard.main:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
    )
