"""Template rendering for the servers.com collection generator."""

import subprocess
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

TEMPLATES_DIR = Path(__file__).parent / "templates"
DEFAULT_TEMPLATE = "collection.go.j2"


def create_jinja_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    """Create and configure a Jinja2 environment."""
    return Environment(
        loader=FileSystemLoader(templates_dir),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def write_text(file_path: Path, text: str) -> None:
    """Write generated source, replacing whatever is at ``file_path``.

    The parent directory must already exist.
    """
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(text)


def format_code(file_path: Path) -> str | None:
    """Format generated Go code in place with gofmt.

    Returns:
        A warning message when formatting could not be applied, else None.
    """
    try:
        subprocess.run(
            ["gofmt", "-w", str(file_path)],
            check=True,
            capture_output=True,
        )
    except subprocess.CalledProcessError as e:
        error_output = e.stderr.decode() if e.stderr else e.stdout.decode() if e.stdout else ""
        return f"gofmt failed for {file_path}: {error_output}".rstrip()
    except FileNotFoundError:
        return "gofmt not found, skipping formatting"
    return None
