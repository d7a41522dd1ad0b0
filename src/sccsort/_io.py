import json
import logging
import tomllib
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from ._errors import GraphFileError

logger = logging.getLogger(__name__)


class EdgeSpec(BaseModel):
    """An edge in a graph document: ``source`` depends on ``target``.

    Accepts either a table (``{ source = "a", target = "b" }``) or a
    two-item list (``["a", "b"]``).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    source: str
    target: str

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        if isinstance(data, list | tuple):
            if len(data) != 2:  # noqa: PLR2004
                msg = f"Edge must have exactly two vertices, got {len(data)}"
                raise ValueError(msg)
            return {"source": data[0], "target": data[1]}
        return data


class GraphDocument(BaseModel):
    """A graph described as a TOML or JSON document."""

    model_config = ConfigDict(extra="forbid")

    vertices: list[str] = []
    edges: list[EdgeSpec] = []

    def seed_vertices(self) -> list[str]:
        """Declared vertices followed by any edge source not declared.

        Seeding with every edge source makes every edge reachable, so the
        whole document ends up in the result.
        """
        seeds = dict.fromkeys(self.vertices)
        for e in self.edges:
            seeds.setdefault(e.source)
        return list(seeds)


def load_graph(path: Path | str) -> GraphDocument:
    """Load a graph document from a ``.toml`` or ``.json`` file.

    Args:
        path: Path to the graph document.

    Returns:
        The validated GraphDocument.

    Raises:
        GraphFileError: If the file cannot be read, cannot be parsed, fails
            validation, or has an unsupported suffix.

    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in {".toml", ".json"}:
        msg = f"Unsupported graph file type '{path.suffix}' (expected .toml or .json): {path}"
        raise GraphFileError(msg)

    try:
        raw = path.read_bytes()
    except OSError as e:
        msg = f"Cannot read graph file {path}: {e}"
        raise GraphFileError(msg) from e

    try:
        if suffix == ".toml":
            document = GraphDocument.model_validate(tomllib.loads(raw.decode("utf-8")))
        else:
            document = GraphDocument.model_validate_json(raw)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise GraphFileError(msg) from e
    except ValidationError as e:
        msg = f"Invalid graph document {path}:\n{e}"
        raise GraphFileError(msg) from e

    logger.debug(f"Loaded graph from {path}: {len(document.vertices)} vertices, {len(document.edges)} edges")
    return document


def components_to_dict[T](components: list[list[T]]) -> dict[str, Any]:
    """Convert sorted components to a serializable dictionary."""
    return {
        "components": [list(component) for component in components],
        "cyclic": [list(component) for component in components if len(component) > 1],
    }


def order_to_dict[T](order: list[T]) -> dict[str, Any]:
    """Convert a topological order to a serializable dictionary."""
    return {"order": list(order)}


def dumps(data: dict[str, Any], fmt: str) -> str:
    """Serialize ``data`` as ``"json"`` or ``"toml"``."""
    if fmt == "json":
        return json.dumps(data, indent=2)
    if fmt == "toml":
        return tomli_w.dumps(data)
    msg = f"Unsupported output format: {fmt}"
    raise ValueError(msg)
