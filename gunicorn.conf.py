"""
Gunicorn configuration for the platform settings API.

Usage:
    gunicorn platform_settings.main:app -c gunicorn.conf.py

Settings reads and patches are short DB round trips; image uploads stream
every submitted slot to the object store within one request.
"""

import os

# PORT lets the container platform choose the listen port
bind = f"0.0.0.0:{os.getenv('PORT', '8000')}"

# Low-traffic admin surface; a small fixed pool keeps DB connections bounded
# (each worker owns an engine with pool_size=5, max_overflow=10)
workers = int(os.getenv("WEB_CONCURRENCY", "2"))

worker_class = "uvicorn.workers.UvicornWorker"

# Up to seven sequential uploads, each bounded by STORAGE_TIMEOUT
timeout = int(os.getenv("GUNICORN_TIMEOUT", "120"))

keepalive = 5

accesslog = "-"  # stdout
errorlog = "-"   # stderr
loglevel = os.getenv("LOG_LEVEL", "info")
