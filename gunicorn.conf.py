"""Gunicorn config for container deployment."""
import os

# Bind to the platform's PORT or default 8000
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Uvicorn async workers. Each worker loads its own copy of the default
# dataset and keeps its own view state; uploads only affect the worker that
# received them, so run a single worker unless the data is read-only.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "1"))

timeout = 60
graceful_timeout = 30

# Keep-alive — must exceed the proxy keep-alive (commonly 60s)
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("GROCERY_LOG_LEVEL", "info").lower()

wsgi_app = "grocery_analytics.main:app"
