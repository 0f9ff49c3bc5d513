"""CLI entry point: python -m httprollup [options] [pairs...]"""
from httprollup.cli import cli


def main():
    cli(prog_name="httprollup")


if __name__ == "__main__":
    main()
