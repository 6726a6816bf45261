import subprocess
import sys


def test():
    """Run the test suite."""
    sys.exit(subprocess.call(["pytest", "tests", *sys.argv[1:]]))


def lint():
    """Run ruff checks without modifying files."""
    print("Running ruff check...")
    rc = subprocess.call(["ruff", "check", "src", "tests"])
    if rc != 0:
        sys.exit(rc)

    print("Running ruff format --check...")
    sys.exit(subprocess.call(["ruff", "format", "--check", "src", "tests"]))


def format():
    """Apply ruff fixes and formatting."""
    print("Running ruff check --fix...")
    subprocess.call(["ruff", "check", "--fix", "src", "tests"])
    print("Running ruff format...")
    sys.exit(subprocess.call(["ruff", "format", "src", "tests"]))
