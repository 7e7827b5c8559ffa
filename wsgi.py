"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 1 --threads 4 -b 0.0.0.0:8000 wsgi:app

Reveal sessions live in process memory, so run a single worker.
"""

from fortune_cookie import create_app

app = create_app()
