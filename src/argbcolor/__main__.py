"""Allow running as ``python -m argbcolor``."""

from argbcolor.cli.main import cli

if __name__ == "__main__":
    cli()
