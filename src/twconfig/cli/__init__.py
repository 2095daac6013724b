from twconfig.cli.main import cli

__all__ = ["cli"]
