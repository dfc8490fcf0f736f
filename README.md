# seroost

Building blocks for a small local search engine. The package extracts text
from plain-text, Markdown and XML/XHTML files, keeps term and document
frequencies in an in-memory index that can be saved as JSON, and ranks
documents against a list of query terms by TF-IDF. An English (Porter2)
Snowball stemmer is included so that words such as "connections" and
"connected" can be reduced to the same term.

Only the standard library is used.

## Stemming

```python
from seroost.english_stemmer import stem_word

stem_word("connections")   # "connect"
stem_word("running")       # "run"
```

`stem_word` expects a lower-case word. For finer control,
`seroost.snowball.SnowballEnv` holds the string being stemmed and
`seroost.english_stemmer.stem(env)` runs the whole algorithm on it, leaving
the result in `env.current`. The individual steps are public as well:
`prelude`, `mark_regions`, `step_1a`, `step_1b` and `step_1c` in
`seroost.english_rules`, and `step_2` to `step_5`, `exception1`,
`exception2` and `postlude` in `seroost.english_stemmer`. Each takes an
environment and a `seroost.english_rules.StemContext`.

## Reading documents

```python
from seroost.documents import ParseError, parse_file_by_extension

try:
    text = parse_file_by_extension("notes/intro.md")
except ParseError as err:
    print(err)
```

The parser is chosen by extension:

| extension        | text returned                                        |
|------------------|------------------------------------------------------|
| `.txt`, `.md`    | the whole file, read as UTF-8                        |
| `.xml`, `.xhtml` | each non-blank run of character data, followed by a space |

A file without an extension, with any other extension, or one that cannot be
read or parsed raises `ParseError`. `parse_txt_file` and `parse_xml_file` can
also be called directly.

## Indexing and searching

```python
from pathlib import Path

from seroost.documents import parse_file_by_extension
from seroost.english_stemmer import stem_word
from seroost.model import Model, load_model, save_model

model = Model()

path = Path("notes/intro.md")
mtime = path.stat().st_mtime_ns
if model.requires_reindexing(path, mtime):
    text = parse_file_by_extension(path)
    tokens = [stem_word(word.lower()) for word in text.split()]
    model.add_document(path, mtime, tokens)

query = [stem_word(word) for word in "connected documents".split()]
for doc_path, rank in model.search_query(query)[:20]:
    print(f"{rank:.5f}  {doc_path}")

save_model(model, "notes/.finder.json")
model = load_model("notes/.finder.json")
```

- Documents are keyed by their path as a string; modification times are
  integers in nanoseconds since the Unix epoch.
- `add_document` replaces any earlier entry for the same path and updates the
  document frequencies; `remove_document` forgets a path.
- `requires_reindexing` is true when the path is not indexed or the given
  time is newer than the recorded one.
- `search_query` returns `(path, rank)` pairs for every document, highest
  rank first; documents whose rank is not a number are left out. The score
  of a term is `compute_tf(term, doc) * compute_idf(term, n, df)`.
- `save_model` writes JSON (and prints `Saving <path>...`); `load_model`
  reads it back. `Model.to_dict` and `model_from_dict` convert to and from
  plain data; malformed data raises `ValueError`.

## What the package does not do

- It has no command-line program and no HTTP server or web interface; the
  functions above are meant to be called from your own code.
- It does not walk directories; the caller decides which files to index.
- It has no tokenizer: text must be split into terms by the caller, as in
  the example above.
- It does not read PDF files.