import json
from pathlib import Path
from typing import Any

import yaml

JAVASCRIPT_SUFFIXES = (".js", ".mjs", ".cjs", ".jsx")


def load_file(file_path: str | Path) -> str:
    """
    Load a file and return its content.

    Args:
        file_path (str or Path): Path to the file to be loaded.

    Returns:
        str: Content of the file.

    Raises:
        FileNotFoundError: If the file does not exist.
        IOError: If there is an error reading the file.
    """
    if not isinstance(file_path, (str, Path)):
        msg = "file_path must be a string or Path object"
        raise TypeError(msg)

    file_path = Path(file_path)

    if not file_path.exists():
        msg = f"File not found: {file_path}"
        raise FileNotFoundError(msg)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        msg = f"Error reading file {file_path}: {e}"
        raise OSError(msg) from e


def load_yaml(file_path: str | Path) -> dict[str, Any]:
    """
    Load a YAML file and return its content as a dictionary.

    Args:
        file_path (str or Path): Path to the YAML file to be loaded.

    Returns:
        dict: Content of the YAML file, empty for an empty file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file content is not valid YAML or not a mapping.
    """
    content = load_file(file_path)

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in file {file_path}: {e}"
        raise ValueError(msg) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Expected a mapping at the top of {file_path}"
        raise ValueError(msg)
    return data


def load_code(file_path: str | Path) -> str:
    """Load a JavaScript source file and return its content."""
    return load_file(file_path)


def find_source_files(path: str | Path) -> list[Path]:
    """Return ``path`` itself for a file, or the JavaScript files below a directory."""
    path = Path(path)
    if path.is_dir():
        return sorted(
            candidate
            for candidate in path.rglob("*")
            if candidate.is_file()
            and candidate.suffix in JAVASCRIPT_SUFFIXES
            and "node_modules" not in candidate.parts
        )
    if not path.exists():
        msg = f"File not found: {path}"
        raise FileNotFoundError(msg)
    return [path]


def dump_json(data: list | dict) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)
