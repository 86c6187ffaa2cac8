# -*- coding: utf-8 -*-
"""
Language File Codec

Converts a PhraseStore to and from the XML language file layout:

    <groups>
      <GroupName>
        <phrase>
          <eng>English text</eng>
          <alt>Alternative text</alt>
        </phrase>
      </GroupName>
    </groups>
"""

from pathlib import Path
from typing import Union

from lxml import etree

import langedit_config as config
from langedit_exceptions import DocumentError, DocumentParseError, FileOperationError
from langedit_logger import get_logger
from locales import tr
from models.phrase_store import PhraseStore

logger = get_logger("codec.document")

PathLike = Union[str, Path]


def _element_text(element) -> str:
    """Concatenated text content of an element and its descendants."""
    return "".join(element.itertext())


def _local_name(element) -> str:
    return etree.QName(element).localname


def parse(document) -> PhraseStore:
    """
    Build a PhraseStore from a parsed language document.

    Args:
        document: lxml ElementTree or root Element

    Returns:
        The populated store

    Raises:
        DocumentParseError: when the structure is not as expected. The
            phrases read so far are available as ``partial_store``.
    """
    root = document.getroot() if hasattr(document, 'getroot') else document
    store = PhraseStore()

    if root is None or _local_name(root) != config.ROOT_TAG:
        found = _local_name(root) if root is not None else ''
        raise DocumentParseError(
            tr("cause_missing_root", expected=config.ROOT_TAG, found=found),
            partial_store=store,
        )

    for group_element in root.iterchildren(tag=etree.Element):
        group = _local_name(group_element)
        if not store.add_group(group):
            raise DocumentParseError(
                tr("cause_duplicate_group", group=group),
                partial_store=store,
                group=group,
            )

        for phrase_element in group_element.iterchildren(tag=etree.Element):
            eng_element = phrase_element.find(config.ENG_TAG)
            alt_element = phrase_element.find(config.ALT_TAG)
            for child, element in ((config.ENG_TAG, eng_element), (config.ALT_TAG, alt_element)):
                if element is None:
                    raise DocumentParseError(
                        tr("cause_missing_child", group=group, child=child),
                        partial_store=store,
                        group=group,
                    )

            # First occurrence of an English phrase wins.
            store.add_phrase(group, _element_text(eng_element), _element_text(alt_element))

    logger.debug(f"Parsed {store.group_count} groups, {store.phrase_count} phrases")
    return store


def _build(store: PhraseStore, english_only: bool):
    root = etree.Element(config.ROOT_TAG)
    for group, phrases in store.groups():
        group_element = etree.SubElement(root, group)
        for eng, alt in phrases.items():
            phrase_element = etree.SubElement(group_element, config.PHRASE_TAG)
            etree.SubElement(phrase_element, config.ENG_TAG).text = eng
            etree.SubElement(phrase_element, config.ALT_TAG).text = eng if english_only else alt
    return etree.ElementTree(root)


def serialize(store: PhraseStore):
    """
    Build a language document from a store, in store order.

    Raises:
        ValueError: if a group name is not a valid XML element name or a
            phrase contains characters XML cannot hold
    """
    return _build(store, english_only=False)


def serialize_english_only(store: PhraseStore):
    """Like serialize(), but every alternative is seeded with its English text."""
    return _build(store, english_only=True)


def to_bytes(document) -> bytes:
    """Serialized form of a document, with XML declaration."""
    return etree.tostring(
        document,
        encoding=config.XML_ENCODING,
        xml_declaration=True,
        pretty_print=True,
    )


def read_document(path: PathLike):
    """
    Read and parse an XML file.

    Raises:
        FileOperationError: if the file cannot be read
        DocumentError: if the file is not well-formed XML
    """
    parser = etree.XMLParser(remove_blank_text=False, resolve_entities=False)
    try:
        with open(path, 'rb') as f:
            return etree.parse(f, parser)
    except OSError as e:
        raise FileOperationError(e.strerror or str(e), file_path=str(path), operation="read") from e
    except etree.XMLSyntaxError as e:
        raise DocumentError(str(e), details={'file_path': str(path)}) from e


def write_document(document, path: PathLike):
    """
    Write a document to disk.

    Raises:
        FileOperationError: if the file cannot be written
    """
    data = to_bytes(document)
    try:
        with open(path, 'wb') as f:
            f.write(data)
    except OSError as e:
        raise FileOperationError(e.strerror or str(e), file_path=str(path), operation="write") from e
    logger.debug(f"Wrote language file: {path} ({len(data)} bytes)")
