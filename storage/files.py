"""
File-per-record storage for Funko collections.
Layout: <data dir>/<user>/<funko id>.json, pretty-printed UTF-8 JSON.
Data dir defaults to ./data; override with FUNKO_DATA_DIR.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Iterator, Union

from funko.models import check_name

DATA_DIR = Path(os.environ.get("FUNKO_DATA_DIR", "data"))

PathLike = Union[str, Path]


def user_dir(data_dir: PathLike, user: str) -> Path:
    """Return the directory holding one user's Funko files. Raises ValidationError for unsafe names."""
    return Path(data_dir) / check_name(user, "User")


def funko_path(data_dir: PathLike, user: str, funko_id: str) -> Path:
    """Return the file path for one Funko of one user. Raises ValidationError for unsafe ids."""
    return user_dir(data_dir, user) / f"{check_name(funko_id, 'ID')}.json"


def ensure_user_dir(data_dir: PathLike, user: str) -> Path:
    """Create the data dir and the user's subdirectory if they do not exist."""
    root = Path(data_dir)
    directory = user_dir(root, user)
    if not root.exists():
        root.mkdir()
    if not directory.exists():
        directory.mkdir()
    return directory


def iter_funko_files(data_dir: PathLike, user: str) -> Iterator[Path]:
    """Yield the user's Funko files in directory-listing order."""
    directory = user_dir(data_dir, user)
    for entry in os.scandir(directory):
        if entry.is_file() and entry.name.endswith(".json"):
            yield Path(entry.path)


def read_funko_file(path: PathLike) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_funko_file(data_dir: PathLike, user: str, funko_id: str, data: Dict[str, Any]) -> Path:
    """Write one Funko record, creating the user directory if it went missing."""
    directory = user_dir(data_dir, user)
    if not directory.exists():
        directory.mkdir(parents=True)
    path = funko_path(data_dir, user, funko_id)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    return path


def delete_funko_file(data_dir: PathLike, user: str, funko_id: str) -> None:
    """Delete one Funko file. Raises OSError (incl. FileNotFoundError) on failure."""
    os.unlink(funko_path(data_dir, user, funko_id))
