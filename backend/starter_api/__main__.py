"""Allow `python -m starter_api` to start the server."""

from starter_api.main import run

run()
