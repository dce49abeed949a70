"""Read documents from YAML/JSON data files and render them as JSON"""

import json
from pathlib import Path
from typing import Iterable

import yaml
from pydantic import ValidationError

from docstore.crud.models import Document


def load_documents(path: str | Path) -> list[Document]:
    """Parse a YAML (or JSON) list of document mappings. Raises ValueError on bad input."""
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Invalid {path.name}: expected a list of documents")

    try:
        return [Document.model_validate(item) for item in data]
    except ValidationError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e


def dump_documents(docs: Iterable[Document]) -> str:
    """Return docs as an indented JSON array."""
    return json.dumps([d.model_dump(mode="json") for d in docs], indent=2, ensure_ascii=False)
