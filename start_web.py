#!/usr/bin/env python3
"""Start the BuildScan web application."""

import uvicorn

HOST = "0.0.0.0"
PORT = 8000

if __name__ == "__main__":
    print(f"BuildScan API on http://localhost:{PORT} (POST /api/scan, POST /api/workspace, docs at /docs)")

    uvicorn.run(
        "apps.web.main:app",
        host=HOST,
        port=PORT,
        reload=True,
        reload_dirs=["apps", "buildscan"]
    )
