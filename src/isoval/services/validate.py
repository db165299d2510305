"""ValidationService: decode, validate and encode catalogued messages.

The validation core is pure and never logs; this layer reports outcomes,
turns codec exceptions into structured errors, and attaches timing.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import structlog
from pydantic import ValidationError

from isoval.domain.records import Record
from isoval.infrastructure import registry, xml_codec
from isoval.infrastructure.errors import DecodeError, IsovalError, UnknownMessageError
from isoval.infrastructure.registry import MessageDefinition
from isoval.services.base import BaseService
from isoval.services.result import ServiceResult

logger = logging.getLogger(__name__)


def _error_code(exc: IsovalError) -> str:
    if isinstance(exc, UnknownMessageError):
        return "UNKNOWN_MESSAGE"
    if isinstance(exc, DecodeError):
        return "DECODE_ERROR"
    return "ERROR"


class ValidationService(BaseService):
    """Accept-or-reject gate for inbound and outbound messages."""

    # --- Helpers ---

    def _decode(
        self, source: bytes | str, message_id: str | None
    ) -> tuple[MessageDefinition, Record]:
        root = xml_codec.parse_root(source)
        if message_id:
            definition = registry.get_definition(message_id)
        else:
            definition = registry.detect(root)
        record = registry.decode_message(
            root,
            definition,
            reject_unknown=self._settings.codec.reject_unknown_elements,
            strip_whitespace=self._settings.codec.strip_whitespace,
        )
        return definition, record

    def _check(
        self, op: str, record: Record, started: float, message_id: str | None
    ) -> ServiceResult:
        outcome = record.validate(policy=self.policy)
        data = {"message_id": message_id, "root": type(record).__name__}
        if outcome.error is not None:
            failure = outcome.error
            with structlog.contextvars.bound_contextvars(op=op, path=failure.path):
                logger.debug(
                    "Rejected %s: [%d] %s",
                    message_id or data["root"],
                    failure.code,
                    failure.message,
                )
            return ServiceResult.failure(
                op,
                "VALIDATION_FAILED",
                failure.message,
                detail={
                    "category": failure.category,
                    "code": int(failure.code),
                    "path": failure.path,
                },
                data=data,
                meta=self._meta(started),
            )
        logger.debug("Accepted %s", message_id or data["root"])
        return ServiceResult.success(op, data, meta=self._meta(started))

    # --- Operations ---

    def list_messages(self) -> ServiceResult:
        """List catalogued message definitions."""
        messages = [
            {
                "message_id": d.message_id,
                "root_tag": d.root_tag,
                "record_type": d.record_type.__name__,
                "namespace": d.namespace,
                "description": d.description,
            }
            for d in registry.MESSAGES.values()
        ]
        return ServiceResult.success("messages", {"messages": messages, "count": len(messages)})

    def validate_record(self, record: Record, *, message_id: str | None = None) -> ServiceResult:
        """Validate an already-built record tree."""
        return self._check("validate", record, self._clock(), message_id)

    def validate_document(
        self, source: bytes | str, *, message_id: str | None = None
    ) -> ServiceResult:
        """Decode *source* and validate the resulting record tree."""
        started = self._clock()
        try:
            definition, record = self._decode(source, message_id)
        except IsovalError as exc:
            logger.debug("Could not decode document: %s", exc)
            return ServiceResult.failure(
                "validate", _error_code(exc), str(exc), meta=self._meta(started)
            )
        return self._check("validate", record, started, definition.message_id)

    def validate_file(self, path: Path, *, message_id: str | None = None) -> ServiceResult:
        """Read *path* and validate its contents."""
        if not path.is_file():
            return ServiceResult.failure(
                "validate", "FILE_NOT_FOUND", f"No such file: {path}", detail={"path": str(path)}
            )
        try:
            source = path.read_bytes()
        except OSError as exc:
            return ServiceResult.failure(
                "validate",
                "READ_ERROR",
                f"Cannot read {path}: {exc.strerror or exc}",
                detail={"path": str(path)},
            )
        return self.validate_document(source, message_id=message_id)

    def decode_document(
        self, source: bytes | str, *, message_id: str | None = None
    ) -> ServiceResult:
        """Decode *source* and return the record tree keyed by tag names."""
        started = self._clock()
        try:
            definition, record = self._decode(source, message_id)
        except IsovalError as exc:
            return ServiceResult.failure(
                "decode", _error_code(exc), str(exc), meta=self._meta(started)
            )
        data = {
            "message_id": definition.message_id,
            "root": type(record).__name__,
            "record": record.model_dump(mode="json", by_alias=True, exclude_none=True),
        }
        return ServiceResult.success("decode", data, meta=self._meta(started))

    def encode_record(
        self, record: Record | dict[str, Any], message_id: str
    ) -> ServiceResult:
        """Encode a record (or its tag-keyed dict form) as markup.

        The record is encoded whether or not it validates; a failed
        validation is reported as a warning.
        """
        started = self._clock()
        try:
            definition = registry.get_definition(message_id)
        except UnknownMessageError as exc:
            return ServiceResult.failure("encode", "UNKNOWN_MESSAGE", str(exc))
        if not isinstance(record, Record):
            try:
                record = definition.record_type.model_validate(record)
            except ValidationError as exc:
                return ServiceResult.failure(
                    "encode",
                    "INVALID_INPUT",
                    f"Input does not describe a {definition.record_type.__name__}",
                    detail={"errors": exc.error_count()},
                )
        warnings = []
        outcome = record.validate(policy=self.policy)
        if outcome.error is not None:
            warnings.append(f"Encoded message does not validate: {outcome.error.message}")
        xml = registry.encode_message(
            record, definition, pretty_print=self._settings.codec.pretty_print
        )
        return ServiceResult.success(
            "encode",
            {"message_id": message_id, "xml": xml.decode("utf-8")},
            warnings=warnings,
            meta=self._meta(started),
        )
