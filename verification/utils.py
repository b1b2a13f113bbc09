from pathlib import Path

import yaml

from verification.constants import PARAMS_DIR


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def _read_text(filepath: Path) -> str:
    """Reads a source file, keeping its line endings."""
    with open(filepath, "r", encoding="utf-8", newline="") as file:
        return file.read()


def _write_text(filepath: Path, text: str) -> None:
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w", encoding="utf-8", newline="") as file:
        file.write(text)


def params_filepath_from_name(name: str) -> Path:
    p = PARAMS_DIR / f"{name}.yml"
    if not p.exists():
        raise ValueError(f"No params file found for '{name}'")

    return p
