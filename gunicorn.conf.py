"""Gunicorn settings for serving approach_engine.main:app.

    gunicorn approach_engine.main:app -c gunicorn.conf.py
"""

import os

bind = os.getenv("BIND", "0.0.0.0:8000")
# Engines are CPU-bound and stateless; one worker per core
workers = int(os.getenv("WEB_CONCURRENCY", os.cpu_count() or 1))
worker_class = "uvicorn.workers.UvicornWorker"
timeout = 60
accesslog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()
