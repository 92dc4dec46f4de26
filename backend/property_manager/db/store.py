"""
Flat-file record store.

Each collection is one JSON array in its own file under the data directory:

    <data_dir>/
        properties.json
        tenants.json
        leases.json
        payments.json
        maintenance.json

Reads parse the whole file; writes serialize the whole collection and
overwrite the file. There is no locking, so two writers racing on the same
collection lose one update (last write wins).
"""
import json
import logging
import random
import string
import time
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple, Type, Union

from property_manager.models import (
    Record,
    Property,
    Tenant,
    Lease,
    Payment,
    MaintenanceRequest,
)

logger = logging.getLogger(__name__)

PROPERTIES = "properties"
TENANTS = "tenants"
LEASES = "leases"
PAYMENTS = "payments"
MAINTENANCE = "maintenance"

# Collection name -> (file name, record model)
COLLECTIONS: Dict[str, Tuple[str, Type[Record]]] = {
    PROPERTIES: ("properties.json", Property),
    TENANTS: ("tenants.json", Tenant),
    LEASES: ("leases.json", Lease),
    PAYMENTS: ("payments.json", Payment),
    MAINTENANCE: ("maintenance.json", MaintenanceRequest),
}

_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_id() -> str:
    """Millisecond timestamp followed by a 9-character base36 suffix."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{int(time.time() * 1000)}{suffix}"


def to_json(record: Record) -> dict:
    """Serialize a record the way it is written to disk."""
    return record.model_dump(by_alias=True, mode="json", exclude_unset=True)


def find(records: Iterable[Record], record_id: str) -> Optional[Record]:
    """Linear lookup by id."""
    if record_id is None:
        return None
    for record in records:
        if record.id == record_id:
            return record
    return None


class StoreFormatError(OSError):
    """A collection file could not be fully read, so it must not be overwritten."""


class RecordStore:
    """Load and save whole collections as JSON files."""

    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)
        # Collections whose file was only partly readable at last load
        self._unreadable: Set[str] = set()

    def model_for(self, name: str) -> Type[Record]:
        return COLLECTIONS[name][1]

    def path_for(self, name: str) -> Path:
        """Backing file for a collection. Raises KeyError for unknown names."""
        file_name, _ = COLLECTIONS[name]
        return self.data_dir / file_name

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    def load(self, name: str) -> List[Record]:
        """
        Load a collection.

        A missing file yields an empty list. An unreadable file, a file that
        is not a JSON array, or entries that are not JSON objects are logged
        and left out, and the collection is then refused by save() so the
        file on disk is never replaced by the partial view. Values that do
        not fit a record's field are kept (see Record). Never raises.
        """
        path = self.path_for(name)
        model = self.model_for(name)
        self._unreadable.discard(name)

        if not path.exists():
            logger.debug(f"[STORE] {path} does not exist, treating '{name}' as empty")
            return []

        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"[STORE] Could not read {path}: {e}")
            self._unreadable.add(name)
            return []

        if not isinstance(raw, list):
            logger.warning(f"[STORE] {path} does not hold a JSON array, treating '{name}' as empty")
            self._unreadable.add(name)
            return []

        records = []
        for index, item in enumerate(raw):
            try:
                if not isinstance(item, dict):
                    raise ValueError("not a JSON object")
                record = model.model_validate(item)
            except ValueError as e:
                logger.warning(f"[STORE] Skipping entry #{index} in {path.name}: {e}")
                self._unreadable.add(name)
                continue
            bad = record.unparsed_fields()
            if bad:
                logger.warning(
                    f"[STORE] Record {record.id or '#' + str(index)} in {path.name} has "
                    f"unrecognized value(s) for {', '.join(sorted(bad))}; kept as stored"
                )
            records.append(record)
        return records

    def save(self, name: str, records: Iterable[Union[Record, dict]]) -> None:
        """
        Overwrite a collection's file with the given records.

        Creates the data directory when needed. Filesystem errors propagate
        as OSError after being logged with the failing path. Raises
        StoreFormatError when the last load of this collection was partial.
        """
        path = self.path_for(name)
        model = self.model_for(name)

        if name in self._unreadable:
            logger.error(f"[STORE] Refusing to overwrite {path}: it could not be fully read")
            raise StoreFormatError(f"{path} could not be fully read; fix or remove it before writing")

        payload = [
            to_json(r if isinstance(r, Record) else model.model_validate(r))
            for r in records
        ]

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            logger.error(f"[STORE] Failed to write {path}: {e}")
            raise

        logger.debug(f"[STORE] Wrote {len(payload)} record(s) to {path}")

    def load_all(self) -> Dict[str, List[Record]]:
        """Every collection keyed by name."""
        return {name: self.load(name) for name in COLLECTIONS}
