"""Gunicorn config for deployment."""
import os

# Bind to the platform's PORT or default 8000
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# One worker: the roster lives in process memory and each worker would fetch
# and hold its own copy. Tune via WEB_CONCURRENCY env var.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "1"))

# Sheet fetch on reload is bounded by FLOCK_FETCH_TIMEOUT
timeout = 60

graceful_timeout = 30

keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"

wsgi_app = "flock.main:app"
