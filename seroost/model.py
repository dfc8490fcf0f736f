"""TF-IDF index over a collection of documents."""

from __future__ import annotations

import json
import math
import os
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Union

PathLike = Union[str, "os.PathLike[str]"]

_NANOS_PER_SECOND = 1_000_000_000


@dataclass
class Document:
    """Term frequencies of one indexed file.

    ``last_modified`` is the file's modification time in nanoseconds since
    the Unix epoch.
    """

    tf: dict[str, int]
    count: int
    last_modified: int

    def to_dict(self) -> dict[str, Any]:
        secs, nanos = divmod(self.last_modified, _NANOS_PER_SECOND)
        return {
            "tf": dict(self.tf),
            "count": self.count,
            "last_modified": {"secs_since_epoch": secs, "nanos_since_epoch": nanos},
        }


def compute_tf(term: str, doc: Document) -> float:
    """Frequency of ``term`` in ``doc`` relative to the document's length."""
    m = float(doc.tf.get(term, 0))
    n = float(doc.count)
    if n == 0.0:
        return math.nan if m == 0.0 else math.copysign(math.inf, m)
    return m / n


def compute_idf(term: str, n: int, df: Mapping[str, int]) -> float:
    """Inverse document frequency of ``term`` among ``n`` documents."""
    m = float(df.get(term, 1))
    if m == 0.0:
        ratio = math.nan if n == 0 else math.inf
    else:
        ratio = n / m
    if math.isnan(ratio):
        return math.nan
    if ratio == 0.0:
        return -math.inf
    if ratio < 0.0:
        return math.nan
    if math.isinf(ratio):
        return math.inf
    return math.log10(ratio)


@dataclass
class Model:
    """Documents keyed by path, with the number of documents holding each term."""

    docs: dict[str, Document] = field(default_factory=dict)
    df: dict[str, int] = field(default_factory=dict)

    def remove_document(self, file_path: PathLike) -> None:
        """Forget a document and lower the document frequencies of its terms."""
        doc = self.docs.pop(os.fspath(file_path), None)
        if doc is None:
            return
        for term in doc.tf:
            if term in self.df:
                self.df[term] -= 1

    def requires_reindexing(self, file_path: PathLike, last_modified: int) -> bool:
        """Tell whether a file is missing from the index or changed since."""
        doc = self.docs.get(os.fspath(file_path))
        if doc is None:
            return True
        return doc.last_modified < last_modified

    def search_query(self, tokens: Iterable[str]) -> list[tuple[str, float]]:
        """Rank every document against the query terms, best first."""
        terms = list(tokens)
        total = len(self.docs)
        result: list[tuple[str, float]] = []
        for path, doc in self.docs.items():
            rank = 0.0
            for term in terms:
                rank += compute_tf(term, doc) * compute_idf(term, total, self.df)
            if not math.isnan(rank):
                result.append((path, rank))
        result.sort(key=lambda item: item[1])
        result.reverse()
        return result

    def add_document(
        self, file_path: PathLike, last_modified: int, tokens: Iterable[str]
    ) -> None:
        """Index a document's terms, replacing any earlier version of it."""
        key = os.fspath(file_path)
        self.remove_document(key)
        terms = list(tokens)
        tf = dict(Counter(terms))
        for term in tf:
            self.df[term] = self.df.get(term, 0) + 1
        self.docs[key] = Document(tf=tf, count=len(terms), last_modified=last_modified)

    def to_dict(self) -> dict[str, Any]:
        """Plain data suitable for JSON."""
        return {
            "docs": {path: doc.to_dict() for path, doc in self.docs.items()},
            "df": dict(self.df),
        }


def _document_from_dict(data: Mapping[str, Any]) -> Document:
    stamp = data["last_modified"]
    secs = int(stamp["secs_since_epoch"])
    nanos = int(stamp["nanos_since_epoch"])
    return Document(
        tf={str(term): int(freq) for term, freq in data["tf"].items()},
        count=int(data["count"]),
        last_modified=secs * _NANOS_PER_SECOND + nanos,
    )


def model_from_dict(data: Mapping[str, Any]) -> Model:
    """Build a model from data produced by :meth:`Model.to_dict`."""
    try:
        docs = {str(path): _document_from_dict(doc) for path, doc in data["docs"].items()}
        df = {str(term): int(freq) for term, freq in data["df"].items()}
    except (KeyError, TypeError, AttributeError, ValueError) as err:
        raise ValueError(f"malformed index data: {err}") from err
    return Model(docs=docs, df=df)


def save_model(model: Model, index_path: PathLike) -> None:
    """Write the model to ``index_path`` as JSON."""
    path = Path(index_path)
    print(f"Saving {path}...")
    with path.open("w", encoding="utf-8") as index_file:
        json.dump(model.to_dict(), index_file)


def load_model(index_path: PathLike) -> Model:
    """Read a model written by :func:`save_model`."""
    with Path(index_path).open("r", encoding="utf-8") as index_file:
        data = json.load(index_file)
    return model_from_dict(data)