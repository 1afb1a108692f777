"""JSON-file record registry and uniqueness validation.

Responsibilities:
- Persist record field values deterministically as UTF-8 JSON.
- Answer "does another record already hold this value" for one field.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

from ..errors import SlugStageError
from ..models.datatypes import SlugRecord
from ..parsing import normalize_optional_string


class RecordRegistry:
    """Filesystem-backed store of slug records keyed by record id."""

    def __init__(self, path: Path) -> None:
        """Initialize the registry for a JSON file path; nothing is read yet."""

        self.path = path
        self._records: dict[str, dict[str, str]] = {}

    def load(self) -> RecordRegistry:
        """Read records from disk; a missing file yields an empty registry."""

        if not self.path.exists():
            self._records = {}
            return self

        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise SlugStageError(
                stage="registry",
                detail=f"Registry file `{self.path}` is not valid JSON: {exc.msg}.",
                hint="Fix or remove the registry file and rerun.",
            ) from exc

        records = payload.get("records") if isinstance(payload, dict) else None
        if not isinstance(records, dict):
            raise SlugStageError(
                stage="registry",
                detail=f"Registry file `{self.path}` must contain a `records` mapping.",
                hint="Expected shape: {\"records\": {\"<id>\": {\"title\": ..., \"alias\": ...}}}.",
            )

        loaded: dict[str, dict[str, str]] = {}
        for record_id, fields in records.items():
            if not isinstance(fields, dict):
                raise SlugStageError(
                    stage="registry",
                    detail=(
                        f"Registry file `{self.path}` has a malformed entry for record "
                        f"`{record_id}`: expected a field mapping."
                    ),
                    hint="Fix or remove the malformed record entry and rerun.",
                )
            loaded[str(record_id)] = {
                str(key): "" if value is None else str(value) for key, value in fields.items()
            }
        self._records = loaded
        return self

    def save(self) -> Path:
        """Write records to disk and return the registry path."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps({"records": self._records}, ensure_ascii=False, indent=2, sort_keys=True),
            encoding="utf-8",
        )
        return self.path

    def get(self, record_id: str) -> SlugRecord | None:
        """Return a detached record for an id, or `None` when unknown."""

        fields = self._records.get(record_id)
        if fields is None:
            return None
        return SlugRecord.from_payload(record_id, fields)

    def put(self, record: SlugRecord) -> None:
        """Insert or replace the stored fields of a record."""

        self._records[record.record_id] = record.as_payload()

    def records(self) -> Iterator[SlugRecord]:
        """Yield detached records in id order."""

        for record_id in sorted(self._records):
            yield SlugRecord.from_payload(record_id, self._records[record_id])

    def values(self, field_name: str, exclude_id: str | None = None) -> set[str]:
        """Return the non-blank values stored in a field by other records."""

        values: set[str] = set()
        for record_id, fields in self._records.items():
            if record_id == exclude_id:
                continue
            value = normalize_optional_string(fields.get(field_name))
            if value is not None:
                values.add(value)
        return values

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __len__(self) -> int:
        return len(self._records)


class UniqueValidator:
    """Flag a record field whose value is already held by another record."""

    def __init__(self, registry: RecordRegistry) -> None:
        self._registry = registry

    def validate_attribute(self, record: SlugRecord, field_name: str) -> None:
        """Add an error to `record` when another record stores the same value."""

        value = normalize_optional_string(getattr(record, field_name, None))
        if value is None:
            return
        if value in self._registry.values(field_name, exclude_id=record.record_id):
            label = field_name.replace("_", " ").capitalize()
            record.add_error(field_name, f'{label} "{value}" has already been taken.')
