"""
Gunicorn configuration for the ReloadLog API.

Usage:
    gunicorn app.main:app -c gunicorn.conf.py

PORT and WEB_CONCURRENCY override the bind port and worker count. Each worker
opens its own engine, so a SQLite DATABASE_URL should point at a file and run
with a single worker; use Postgres for more.
"""

import multiprocessing
import os

bind = f"0.0.0.0:{os.getenv('PORT', '8000')}"

workers = int(os.getenv("WEB_CONCURRENCY", "0")) or min(multiprocessing.cpu_count() * 2 + 1, 8)

worker_class = "uvicorn.workers.UvicornWorker"

# Requests are short CRUD and catalog reads
timeout = 30
graceful_timeout = 20
keepalive = 5

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
