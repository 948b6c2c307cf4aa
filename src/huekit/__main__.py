"""Allow ``python -m huekit``."""

from huekit.cli.main import cli

if __name__ == "__main__":
    cli()
