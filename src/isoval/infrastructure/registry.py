"""Message catalogue: which record type decodes which document.

ISO 20022 messages travel inside a ``Document`` envelope whose default
namespace names the message (``urn:iso:std:iso:20022:tech:xsd:admi.004.001.02``).
FedNow key-exchange messages are bare root elements identified by tag.
"""

from __future__ import annotations

from lxml import etree
from pydantic import BaseModel

from isoval.domain.records import Record
from isoval.infrastructure import xml_codec
from isoval.infrastructure.errors import DecodeError, UnknownMessageError
from isoval.schemas import admi_004_001_02, fednow, reda_033_001_01

ISO_NAMESPACE_PREFIX = "urn:iso:std:iso:20022:tech:xsd:"


class MessageDefinition(BaseModel):
    """How one message type is carried on the wire."""

    model_config = {"frozen": True}

    message_id: str
    root_tag: str
    record_type: type[Record]
    namespace: str | None = None
    description: str = ""

    @property
    def enveloped(self) -> bool:
        return self.namespace is not None


def _iso(
    message_id: str, root_tag: str, record_type: type[Record], description: str
) -> MessageDefinition:
    return MessageDefinition(
        message_id=message_id,
        root_tag=root_tag,
        record_type=record_type,
        namespace=f"{ISO_NAMESPACE_PREFIX}{message_id}",
        description=description,
    )


MESSAGES: dict[str, MessageDefinition] = {
    d.message_id: d
    for d in (
        _iso(
            admi_004_001_02.MESSAGE_ID,
            admi_004_001_02.ROOT_TAG,
            admi_004_001_02.SystemEventNotificationV02,
            "System Event Notification",
        ),
        _iso(
            reda_033_001_01.MESSAGE_ID,
            reda_033_001_01.ROOT_TAG,
            reda_033_001_01.SecuritiesAuditTrailQueryV01,
            "Securities Audit Trail Query",
        ),
        MessageDefinition(
            message_id="fednow.keyexchange",
            root_tag=fednow.KEY_EXCHANGE_ROOT_TAG,
            record_type=fednow.FedNowMessageSignatureKeyExchange,
            description="FedNow Message Signature Key Exchange",
        ),
        MessageDefinition(
            message_id="fednow.publickeys",
            root_tag=fednow.PUBLIC_KEYS_ROOT_TAG,
            record_type=fednow.FedNowPublicKeyResponses,
            description="FedNow Public Key Responses",
        ),
    )
}


def get_definition(message_id: str) -> MessageDefinition:
    """Look up a catalogued message by identifier."""
    try:
        return MESSAGES[message_id]
    except KeyError:
        known = ", ".join(sorted(MESSAGES))
        raise UnknownMessageError(
            f"Unknown message {message_id!r}; known messages: {known}"
        ) from None


def detect(root: etree._Element) -> MessageDefinition:
    """Identify the message carried by a parsed root element."""
    tag = xml_codec.local_name(root)
    if tag == xml_codec.DOCUMENT_TAG:
        namespace = xml_codec.namespace_of(root)
        for definition in MESSAGES.values():
            if definition.enveloped and definition.namespace == namespace:
                return definition
        raise UnknownMessageError(f"No message registered for namespace {namespace!r}")
    for definition in MESSAGES.values():
        if not definition.enveloped and definition.root_tag == tag:
            return definition
    raise UnknownMessageError(f"No message registered for root element {tag!r}")


def decode_message(
    root: etree._Element,
    definition: MessageDefinition,
    *,
    reject_unknown: bool = True,
    strip_whitespace: bool = True,
) -> Record:
    """Decode a parsed document according to *definition*."""
    if definition.enveloped:
        element = xml_codec.document_body(root, definition.root_tag, definition.namespace)
    else:
        if xml_codec.local_name(root) != definition.root_tag:
            raise DecodeError(
                f"expected {definition.root_tag!r} root, found {xml_codec.local_name(root)!r}"
            )
        element = root
    return xml_codec.decode_element(
        element,
        definition.record_type,
        reject_unknown=reject_unknown,
        strip_whitespace=strip_whitespace,
    )


def encode_message(
    record: Record, definition: MessageDefinition, *, pretty_print: bool = True
) -> bytes:
    """Encode *record* the way *definition* travels on the wire."""
    if definition.namespace is not None:
        return xml_codec.encode_document(
            record, definition.root_tag, definition.namespace, pretty_print=pretty_print
        )
    return xml_codec.encode(record, definition.root_tag, pretty_print=pretty_print)
