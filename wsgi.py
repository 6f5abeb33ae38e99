"""WSGI entry point for the task list client."""

import os

from client_app import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))
