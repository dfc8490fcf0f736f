"""Extract plain text from files to be indexed."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ElementTree
from pathlib import Path
from typing import Iterator, Union

PathLike = Union[str, "os.PathLike[str]"]


class ParseError(Exception):
    """A file could not be turned into text."""


def parse_txt_file(file_path: PathLike) -> str:
    """Return the whole content of a UTF-8 text file."""
    path = Path(file_path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise ParseError(f"could not open file {path}: {err}") from err


def _texts(element: ElementTree.Element) -> Iterator[str]:
    if element.text:
        yield element.text
    for child in element:
        yield from _texts(child)
        if child.tail:
            yield child.tail


def parse_xml_file(file_path: PathLike) -> str:
    """Return the character data of an XML file, each run followed by a space."""
    path = Path(file_path)
    try:
        with path.open("rb") as xml_file:
            tree = ElementTree.parse(xml_file)
    except ElementTree.ParseError as err:
        row, column = err.position
        raise ParseError(f"{path}:{row}:{column}: ERROR: {err}") from err
    except OSError as err:
        raise ParseError(f"could not open file {path}: {err}") from err
    return "".join(
        f"{text} " for text in _texts(tree.getroot()) if text.strip()
    )


def parse_file_by_extension(file_path: PathLike) -> str:
    """Pick a parser from the file's extension and return the file's text."""
    path = Path(file_path)
    extension = path.suffix[1:]
    if not extension:
        raise ParseError(f"can't detect file type of {path} without extension")
    if extension in ("xhtml", "xml"):
        return parse_xml_file(path)
    if extension in ("txt", "md"):
        return parse_txt_file(path)
    raise ParseError(
        f"can't detect file type of {path}: unsupported extension {extension}"
    )