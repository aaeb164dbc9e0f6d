"""Structured-data formats for resource files.

Resource files are decoded as plain data only: JSON through the ``json``
module and YAML through ``yaml.safe_load``. File content is never executed.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

from infrastructure.i18n.codec import ResourceTree
from infrastructure.i18n.errors import DecodeError


def _decode_json(text: str) -> Any:
    return json.loads(text)


def _encode_json(tree: ResourceTree) -> str:
    # Two-space indent, non-ASCII left as is, no trailing newline.
    return json.dumps(tree, indent=2, ensure_ascii=False)


def _decode_yaml(text: str) -> Any:
    data = yaml.safe_load(text)
    return {} if data is None else data


def _encode_yaml(tree: ResourceTree) -> str:
    return yaml.safe_dump(
        tree,
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
    )


@dataclass(frozen=True)
class ResourceFormat:
    """Codec pair for one file format.

    Attributes:
        name: Format identifier (e.g. "json").
        extension: Extension used when creating a new file.
        decode: Text to data.
        encode: Tree to text.
    """

    name: str
    extension: str
    decode: Callable[[str], Any]
    encode: Callable[[ResourceTree], str]

    def read(self, path: Path) -> ResourceTree:
        """Read and decode ``path`` into a tree.

        Raises:
            DecodeError: If the file cannot be read, does not parse, or its
                top level is not a mapping.
        """
        try:
            text = Path(path).read_text(encoding="utf-8-sig")
            data = self.decode(text)
        except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
            raise DecodeError(path, str(e)) from e
        if not isinstance(data, dict):
            raise DecodeError(
                path, f"top level must be a mapping, got {type(data).__name__}"
            )
        return data

    def dumps(self, tree: ResourceTree) -> str:
        return self.encode(tree)


JSON_FORMAT = ResourceFormat("json", ".json", _decode_json, _encode_json)
YAML_FORMAT = ResourceFormat("yaml", ".yml", _decode_yaml, _encode_yaml)

FORMATS_BY_NAME: Dict[str, ResourceFormat] = {
    "json": JSON_FORMAT,
    "yaml": YAML_FORMAT,
    "yml": YAML_FORMAT,
}

FORMATS_BY_EXTENSION: Dict[str, ResourceFormat] = {
    ".json": JSON_FORMAT,
    ".yaml": YAML_FORMAT,
    ".yml": YAML_FORMAT,
}


def format_for_path(path: Path) -> Optional[ResourceFormat]:
    """Return the format handling ``path``, or None if unsupported."""
    return FORMATS_BY_EXTENSION.get(Path(path).suffix.lower())


def get_format(name: str) -> ResourceFormat:
    """Look up a format by name.

    Raises:
        ValueError: If the format is unknown.
    """
    try:
        return FORMATS_BY_NAME[name.lower()]
    except KeyError as e:
        raise ValueError(f"Unsupported resource format: {name}") from e
