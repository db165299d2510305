"""Tagged-markup codec for record trees.

Decoding maps child element local names to field aliases, attributes to
:class:`~isoval.domain.records.XmlAttribute` fields and element text to the
:class:`~isoval.domain.records.XmlText` field, then builds the record with a
single ``model_validate``. Schema constraints are NOT applied here: an
over-long ``Max35Text`` decodes fine and is rejected later by ``validate()``.

Parsing uses a hardened lxml parser: no entity resolution, no network access.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from types import NoneType, UnionType
from typing import Annotated, Any, Union, get_args, get_origin

from lxml import etree
from pydantic import RootModel, ValidationError

from isoval.domain.records import Record, field_tag, is_attribute, is_text
from isoval.infrastructure.errors import DecodeError

logger = logging.getLogger(__name__)

DOCUMENT_TAG = "Document"


def _parser() -> etree.XMLParser:
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        huge_tree=False,
    )


def parse_root(source: bytes | str) -> etree._Element:
    """Parse *source* and return its root element."""
    data = source.encode("utf-8") if isinstance(source, str) else source
    try:
        return etree.fromstring(data, _parser())
    except etree.XMLSyntaxError as exc:
        raise DecodeError(f"Malformed markup: {exc}") from exc


def local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def namespace_of(element: etree._Element) -> str | None:
    return etree.QName(element).namespace


def _unwrap(annotation: Any) -> tuple[Any, bool]:
    """Strip ``Annotated``/``Optional`` and report whether the field repeats."""
    origin = get_origin(annotation)
    if origin is Annotated:
        return _unwrap(get_args(annotation)[0])
    if origin is Union or origin is UnionType:
        members = [a for a in get_args(annotation) if a is not NoneType]
        return _unwrap(members[0])
    if origin is list:
        inner, _ = _unwrap(get_args(annotation)[0])
        return inner, True
    return annotation, False


def _text(element: etree._Element, strip: bool) -> str:
    """Character data of *element*, including text that follows nested children."""
    text = "".join([element.text or "", *(child.tail or "" for child in element)])
    return text.strip() if strip else text


def _leaf_text(
    element: etree._Element, path: str, *, reject_unknown: bool, strip_whitespace: bool
) -> str:
    nested = [child for child in element if isinstance(child.tag, str)]
    if nested:
        tag = local_name(nested[0])
        if reject_unknown:
            raise DecodeError(f"unexpected element {tag!r} inside a text value", path=path)
        logger.debug("Dropping %d element(s) inside text value %s", len(nested), path)
    return _text(element, strip_whitespace)


def _element_data(
    element: etree._Element,
    record_type: type[Record],
    path: str,
    *,
    reject_unknown: bool,
    strip_whitespace: bool,
) -> dict[str, Any]:
    fields = record_type.model_fields
    children: dict[str, tuple[str, Any]] = {}
    data: dict[str, Any] = {}

    for name, info in fields.items():
        tag = field_tag(name, info)
        if is_attribute(info):
            value = element.get(tag)
            if value is not None:
                data[name] = value
        elif is_text(info):
            data[name] = _text(element, strip_whitespace)
        else:
            children[tag] = (name, info)

    for child in element:
        if not isinstance(child.tag, str):
            continue
        tag = local_name(child)
        child_path = f"{path}/{tag}"
        entry = children.get(tag)
        if entry is None:
            if reject_unknown:
                raise DecodeError(
                    f"unexpected element {tag!r} in {record_type.__name__}", path=path
                )
            logger.debug("Skipping unknown element %s", child_path)
            continue
        name, info = entry
        inner, repeated = _unwrap(info.annotation)
        if isinstance(inner, type) and issubclass(inner, Record):
            value: Any = _element_data(
                child,
                inner,
                child_path,
                reject_unknown=reject_unknown,
                strip_whitespace=strip_whitespace,
            )
        else:
            value = _leaf_text(
                child,
                child_path,
                reject_unknown=reject_unknown,
                strip_whitespace=strip_whitespace,
            )
        if repeated:
            data.setdefault(name, []).append(value)
        elif name in data:
            raise DecodeError(f"element {tag!r} appears more than once", path=path)
        else:
            data[name] = value
    return data


def decode_element(
    element: etree._Element,
    record_type: type[Record],
    *,
    reject_unknown: bool = True,
    strip_whitespace: bool = True,
) -> Record:
    """Build a *record_type* instance from an already parsed element."""
    root_path = local_name(element)
    data = _element_data(
        element,
        record_type,
        root_path,
        reject_unknown=reject_unknown,
        strip_whitespace=strip_whitespace,
    )
    try:
        return record_type.model_validate(data)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = "/".join(str(part) for part in first["loc"])
        raise DecodeError(
            f"{record_type.__name__}: {first['msg']} at {location or '<root>'} "
            f"({exc.error_count()} structural error(s))",
            path=root_path,
        ) from exc


def document_body(
    root: etree._Element, root_tag: str, namespace: str | None = None
) -> etree._Element:
    """Return the message element inside a ``Document`` envelope."""
    if local_name(root) != DOCUMENT_TAG:
        raise DecodeError(f"expected {DOCUMENT_TAG!r} root, found {local_name(root)!r}")
    if namespace is not None and namespace_of(root) != namespace:
        raise DecodeError(
            f"document namespace {namespace_of(root)!r} does not match {namespace!r}"
        )
    body = [child for child in root if isinstance(child.tag, str)]
    if len(body) != 1 or local_name(body[0]) != root_tag:
        found = ", ".join(local_name(child) for child in body) or "nothing"
        raise DecodeError(f"expected a single {root_tag!r} element, found {found}")
    return body[0]


def decode(
    source: bytes | str,
    record_type: type[Record],
    *,
    root_tag: str | None = None,
    reject_unknown: bool = True,
    strip_whitespace: bool = True,
) -> Record:
    """Decode a bare root element into *record_type*."""
    root = parse_root(source)
    if root_tag is not None and local_name(root) != root_tag:
        raise DecodeError(f"expected {root_tag!r} root, found {local_name(root)!r}")
    return decode_element(
        root, record_type, reject_unknown=reject_unknown, strip_whitespace=strip_whitespace
    )


def decode_document(
    source: bytes | str,
    record_type: type[Record],
    root_tag: str,
    namespace: str | None = None,
    *,
    reject_unknown: bool = True,
    strip_whitespace: bool = True,
) -> Record:
    """Decode an ISO 20022 ``Document``-enveloped message into *record_type*."""
    body = document_body(parse_root(source), root_tag, namespace)
    return decode_element(
        body, record_type, reject_unknown=reject_unknown, strip_whitespace=strip_whitespace
    )


# --- Encoding ---


def to_text(value: Any) -> str:
    """Lexical form of a leaf value."""
    if isinstance(value, RootModel):
        return str(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def _qualify(tag: str, namespace: str | None) -> str:
    return f"{{{namespace}}}{tag}" if namespace else tag


def _fill(element: etree._Element, record: Record, namespace: str | None) -> None:
    for name, info in type(record).model_fields.items():
        value = getattr(record, name)
        if value is None:
            continue
        tag = field_tag(name, info)
        if is_attribute(info):
            element.set(tag, to_text(value))
            continue
        if is_text(info):
            element.text = to_text(value)
            continue
        for item in value if isinstance(value, list) else [value]:
            child = etree.SubElement(element, _qualify(tag, namespace))
            if isinstance(item, Record):
                _fill(child, item, namespace)
            else:
                child.text = to_text(item)


def _root_element(tag: str, namespace: str | None) -> etree._Element:
    nsmap = {None: namespace} if namespace else None
    return etree.Element(_qualify(tag, namespace), nsmap=nsmap)


def _serialize(element: etree._Element, pretty_print: bool) -> bytes:
    return etree.tostring(
        element, xml_declaration=True, encoding="UTF-8", pretty_print=pretty_print
    )


def encode(
    record: Record,
    root_tag: str,
    *,
    namespace: str | None = None,
    pretty_print: bool = True,
) -> bytes:
    """Encode *record* as a bare *root_tag* element."""
    root = _root_element(root_tag, namespace)
    _fill(root, record, namespace)
    return _serialize(root, pretty_print)


def encode_document(
    record: Record,
    root_tag: str,
    namespace: str,
    *,
    pretty_print: bool = True,
) -> bytes:
    """Encode *record* inside a ``Document`` envelope in *namespace*."""
    document = _root_element(DOCUMENT_TAG, namespace)
    body = etree.SubElement(document, _qualify(root_tag, namespace))
    _fill(body, record, namespace)
    return _serialize(document, pretty_print)
