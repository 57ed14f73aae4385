#!/usr/bin/env python3
"""Run script for rehabNow."""

import uvicorn

from rehabnow.config import API_HOST, API_PORT, LOG_LEVEL

if __name__ == "__main__":
    uvicorn.run(
        "rehabnow.api.app:app",
        host=API_HOST,
        port=API_PORT,
        log_level=LOG_LEVEL,
        reload=True
    )
