"""Entry point for the notion-register CLI."""

from notion_register.cli import cli


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
