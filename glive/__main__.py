"""
Entry point for the `glive` command-line interface.

glive runs grml-live as a CI build step and writes changelogs between
image builds. This module provides the main() entry point that delegates
to the Click CLI.
"""


def main():
    """Main entry point for the glive CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
