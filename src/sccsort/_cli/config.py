"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

OUTPUT_FORMATS = ("table", "json", "toml")


class ConfigError(Exception):
    """Error in sccsort configuration."""


@dataclass(slots=True, frozen=True)
class SccsortConfig:
    """Configuration loaded from pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    graph: Path | None = None
    ignore_case: bool | None = None
    format: str | None = None
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def load_config(pyproject_path: Path) -> SccsortConfig:
    """Load and validate [tool.sccsort] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed SccsortConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("sccsort", {})

    if not section:
        return SccsortConfig(project_root=project_root)

    unknown = set(section) - {"graph", "ignore-case", "format"}
    if unknown:
        msg = f"Unknown [tool.sccsort] keys: {', '.join(sorted(unknown))}"
        raise ConfigError(msg)

    graph_path: Path | None = None
    if "graph" in section:
        graph_value = section["graph"]
        if not isinstance(graph_value, str):
            msg = "Invalid [tool.sccsort].graph: expected string path"
            raise ConfigError(msg)
        graph_path = Path(graph_value)
        if not graph_path.is_absolute():
            graph_path = project_root / graph_path

    ignore_case: bool | None = None
    if "ignore-case" in section:
        ignore_case = section["ignore-case"]
        if not isinstance(ignore_case, bool):
            msg = "Invalid [tool.sccsort].ignore-case: expected boolean"
            raise ConfigError(msg)

    output_format: str | None = None
    if "format" in section:
        output_format = section["format"]
        if output_format not in OUTPUT_FORMATS:
            msg = f"Invalid [tool.sccsort].format: expected one of {', '.join(OUTPUT_FORMATS)}"
            raise ConfigError(msg)

    return SccsortConfig(
        graph=graph_path,
        ignore_case=ignore_case,
        format=output_format,
        project_root=project_root,
    )


def get_config() -> SccsortConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        SccsortConfig (may be empty if no pyproject.toml or no [tool.sccsort] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return SccsortConfig()
    return load_config(pyproject_path)
