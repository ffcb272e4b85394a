"""
Collection management for a single user's Funko figures.

Keeps the in-memory list and the per-user directory of JSON files in step:
every mutating call updates memory and the matching file before returning.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from funko.models import Funko, check_name
from market.tiers import ValueTier, compute_bands, value_tier
from storage.files import (
    DATA_DIR,
    delete_funko_file,
    ensure_user_dir,
    funko_path,
    iter_funko_files,
    read_funko_file,
    user_dir,
    write_funko_file,
)

logger = logging.getLogger(__name__)


class ModifyPolicy(Enum):
    # Target replaced in place (its id may change)
    REPLACE = "replace"
    # Replacement id already owned by another record: target is dropped,
    # replacement is not stored
    DROP_ON_COLLISION = "drop_on_collision"


@dataclass
class CollectionResult:
    success: bool
    message: str
    funko_id: str
    funko: Optional[Funko] = None
    tier: Optional[ValueTier] = None
    policy: Optional[ModifyPolicy] = None

    def __bool__(self) -> bool:
        return self.success


class FunkoCollectionManager:
    """All management operations over one user's Funko collection."""

    def __init__(
        self,
        user: str,
        data_dir: Union[str, Path] = DATA_DIR,
        funkos: Optional[List[Funko]] = None,
    ):
        self.user = check_name(user, "User")
        self.data_dir = Path(data_dir)
        self.funkos: List[Funko] = []

        if funkos is not None:
            self.funkos = list(funkos)
        else:
            ensure_user_dir(self.data_dir, user)
            self._load()

    def __len__(self) -> int:
        return len(self.funkos)

    def __iter__(self) -> Iterator[Funko]:
        return iter(self.funkos)

    def __contains__(self, funko_id: object) -> bool:
        return self._index_of(funko_id) != -1

    @property
    def user_dir(self) -> Path:
        return user_dir(self.data_dir, self.user)

    def _load(self) -> None:
        directory = self.user_dir
        if not directory.exists():
            logger.error("Couldn't find %s", directory)
            return

        for path in iter_funko_files(self.data_dir, self.user):
            try:
                funko = Funko.blank().parse(read_funko_file(path))
            # ValueError covers bad UTF-8, bad JSON and ValidationError
            except ValueError as e:
                logger.error("Skipping unreadable Funko file %s: %s", path, e)
                continue
            self.funkos.append(funko)
        logger.debug("Loaded %d Funkos for %s", len(self.funkos), self.user)

    def _index_of(self, funko_id: object) -> int:
        for i, funko in enumerate(self.funkos):
            if funko.id == funko_id:
                return i
        return -1

    def _delete_file(self, funko_id: str) -> None:
        """Best-effort delete; failures are logged and never raised."""
        try:
            delete_funko_file(self.data_dir, self.user, funko_id)
        except OSError as e:
            logger.warning(
                "Error deleting file %s: %s",
                funko_path(self.data_dir, self.user, funko_id),
                e,
            )

    def _write_file(self, funko: Funko) -> None:
        write_funko_file(self.data_dir, self.user, funko.id, funko.to_json())

    def _ok(self, message: str, funko_id: str, **extra) -> CollectionResult:
        logger.info(message)
        return CollectionResult(True, message, funko_id, **extra)

    def _fail(self, message: str, funko_id: str) -> CollectionResult:
        # Reported to the caller through the result; not a storage fault
        logger.info(message)
        return CollectionResult(False, message, funko_id)

    def _not_found(self, funko_id: str) -> CollectionResult:
        return self._fail(
            f"A Funko with ID {funko_id} does not exist in the collection.", funko_id
        )

    def get_funko(self, funko_id: str) -> Optional[Funko]:
        index = self._index_of(funko_id)
        return self.funkos[index] if index != -1 else None

    def add_funko(self, funko: Funko) -> CollectionResult:
        """Add a Funko. Reports a collision, without changing anything, if the id is taken."""
        if self._index_of(funko.id) != -1:
            return self._fail(
                f"A Funko with ID {funko.id} already exists in the collection.", funko.id
            )

        # Write first so a failed write leaves memory untouched
        self._write_file(funko)
        self.funkos.append(funko)
        return self._ok(
            f"Funko with ID {funko.id} has been added to the collection.", funko.id, funko=funko
        )

    def modify_funko(self, funko_id: str, modified: Funko) -> CollectionResult:
        """
        Replace the Funko stored under funko_id with modified.

        If modified.id already belongs to a different Funko, the original
        entry is dropped instead and nothing new is written, so ids stay
        unique. The old file is always deleted (best-effort).
        """
        index = self._index_of(funko_id)
        if index == -1:
            return self._not_found(funko_id)

        # Reject an unusable id before anything changes
        funko_path(self.data_dir, self.user, modified.id)

        clash = self._index_of(modified.id)
        if clash != -1 and clash != index:
            policy = ModifyPolicy.DROP_ON_COLLISION
            del self.funkos[index]
        else:
            policy = ModifyPolicy.REPLACE
            self.funkos[index] = modified

        self._delete_file(funko_id)
        if policy is ModifyPolicy.REPLACE:
            self._write_file(modified)
        else:
            logger.warning(
                "Funko ID %s is already in use; removed %s instead of overwriting",
                modified.id,
                funko_id,
            )

        return self._ok(
            f"Funko with ID {funko_id} has been modified in the collection.",
            funko_id,
            funko=modified if policy is ModifyPolicy.REPLACE else None,
            policy=policy,
        )

    def remove_funko(self, funko_id: str) -> CollectionResult:
        """Remove a Funko from memory and (best-effort) from disk."""
        index = self._index_of(funko_id)
        if index == -1:
            return self._not_found(funko_id)

        removed = self.funkos.pop(index)
        self._delete_file(funko_id)
        return self._ok(
            f"Funko with ID {funko_id} has been removed from the collection.",
            funko_id,
            funko=removed,
        )

    def list_funkos(self) -> List[Tuple[Funko, ValueTier]]:
        """Every Funko in collection order, paired with its market value tier."""
        bands = compute_bands(f.market_value for f in self.funkos)
        if bands is None:
            return []
        return [(funko, value_tier(funko.market_value, bands)) for funko in self.funkos]

    def show_funko(self, funko_id: str) -> CollectionResult:
        """Look up one Funko; its tier is computed against the whole collection."""
        funko = self.get_funko(funko_id)
        if funko is None:
            return self._fail(f"Error. Funko with {funko_id} does not exist in system", funko_id)

        bands = compute_bands(f.market_value for f in self.funkos)
        return CollectionResult(
            True,
            f"Funko with ID {funko_id} found.",
            funko_id,
            funko=funko,
            tier=value_tier(funko.market_value, bands),
        )
