"""Fixture loading: YAML/JSON document files into validated models and stores"""

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from docstore.core.models import Document
from docstore.crud.repo import DocumentRepo


def _entries(data: Any, path: Path) -> list:
    """Accept a top-level list or a mapping with a 'documents' list."""
    if data is None:
        return []
    if isinstance(data, dict) and "documents" in data:
        data = data["documents"] or []
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of documents or a 'documents' mapping")
    return data


def load_documents(path: str | Path) -> list[Document]:
    """Parse a YAML or JSON file into Document models. Raises ValueError on bad input."""
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path}: {e}") from e

    docs = []
    for i, entry in enumerate(_entries(data, path)):
        try:
            docs.append(Document.model_validate(entry))
        except ValidationError as e:
            raise ValueError(f"{path}: document #{i} is invalid: {e}") from e
    logger.debug("Loaded {} document(s) from {}", len(docs), path)
    return docs


def seed(repo: DocumentRepo, docs: list[Document]) -> list[Document]:
    """Save each document in order; returns the stored instances."""
    return [repo.save(d) for d in docs]
