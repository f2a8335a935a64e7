"""Allow ``python -m bookcast``."""

from bookcast.cli import app

app(prog_name="bookcast")
