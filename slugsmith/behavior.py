"""Record lifecycle behaviour that fills a slug field from a source field.

Responsibilities:
- Bind source and target field names on arbitrary record objects.
- Compute the target value on `before_insert`/`before_update` events.
- Check uniqueness against a detached copy of the record so that the
  record's own stored value never collides with itself.

Key types:
- `TransliterateBehavior`: event-bound slug assignment.
- `RecordValidatorProtocol`: validator contract used by the uniqueness check.
"""

from __future__ import annotations

import copy
from typing import Mapping, Protocol

from .config import SlugConfig
from .models.datatypes import RecordEvent, SlugResult
from .resolver import resolve_slug
from .telemetry.logger import SlugLogger
from .uniqueness import ExistsPredicate


class ValidatableRecordProtocol(Protocol):
    """Protocol for records that collect field validation errors."""

    def clear_errors(self) -> None:
        """Drop all validation messages."""

    def has_errors(self) -> bool:
        """Return whether any field carries a validation message."""


class RecordValidatorProtocol(Protocol):
    """Protocol for a validator that adds errors for an already-taken value."""

    def validate_attribute(self, record: ValidatableRecordProtocol, field_name: str) -> None:
        """Validate one field of `record`, adding errors to it on failure."""


class TransliterateBehavior:
    """Assign a transliterated, optionally unique slug on record save events."""

    def __init__(
        self,
        from_field: str = "title",
        to_field: str = "alias",
        validate_unique: bool = True,
        events: Mapping[RecordEvent, str] | None = None,
        max_attempts: int | None = None,
        logger: SlugLogger | None = None,
    ) -> None:
        """Initialize field bindings; events default to insert and update."""

        SlugConfig(
            from_field=from_field,
            to_field=to_field,
            validate_unique=validate_unique,
            max_attempts=max_attempts,
        ).validate()
        self.from_field = from_field
        self.to_field = to_field
        self.validate_unique = validate_unique
        self.max_attempts = max_attempts
        self.events: dict[RecordEvent, str] = (
            dict(events)
            if events
            else {
                RecordEvent.BEFORE_INSERT: to_field,
                RecordEvent.BEFORE_UPDATE: to_field,
            }
        )
        self._logger = logger

    @classmethod
    def from_config(
        cls, config: SlugConfig, logger: SlugLogger | None = None
    ) -> TransliterateBehavior:
        """Create a behaviour from a validated `SlugConfig`."""

        return cls(
            from_field=config.from_field,
            to_field=config.to_field,
            validate_unique=config.validate_unique,
            max_attempts=config.max_attempts,
            logger=logger,
        )

    def evaluate(
        self,
        record: object,
        event: RecordEvent,
        validator: RecordValidatorProtocol,
    ) -> str | None:
        """Compute and assign the slug for `event`; unbound events are ignored."""

        target_field = self.events.get(event)
        if target_field is None:
            return None

        result = self.get_value(record, validator)
        setattr(record, target_field, result.value)
        return result.value

    def get_value(self, record: object, validator: RecordValidatorProtocol) -> SlugResult:
        """Resolve the slug for `record` without assigning it."""

        stage = "slug"
        if self._logger is not None:
            self._logger.log_stage_start(stage, field=self.to_field)
        try:
            result = resolve_slug(
                getattr(record, self.to_field),
                getattr(record, self.from_field),
                self.validate_unique,
                self.exists_predicate(record, validator),
                max_attempts=self.max_attempts,
                on_collision=self._logger.log_collision if self._logger is not None else None,
            )
        except Exception as exc:
            if self._logger is not None:
                self._logger.log_stage_failure(stage, type(exc).__name__)
            raise
        if self._logger is not None:
            self._logger.log_stage_complete(stage, field=self.to_field, attempts=result.attempts)
        return result

    def exists_predicate(
        self, record: object, validator: RecordValidatorProtocol
    ) -> ExistsPredicate:
        """Build a predicate that validates each candidate on a copy of `record`."""

        def _exists(candidate: str) -> bool:
            model = copy.copy(record)
            model.clear_errors()
            setattr(model, self.to_field, candidate)
            validator.validate_attribute(model, self.to_field)
            return model.has_errors()

        return _exists
