"""Module entrypoint for ``python -m xdir``."""

from xdir.cli.main import app

if __name__ == "__main__":
    app(prog_name="xdir")
