"""Allow ``python -m rnsetup``."""

from rnsetup.main import cli

if __name__ == "__main__":
    cli()
