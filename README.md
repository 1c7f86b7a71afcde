# phpdocbook

A library for reading the PHP manual's DocBook XML function reference pages.
It turns a reference page into a function definition with a PHP-style
signature and a structured description, and it provides the pieces a terminal
viewer for the manual is built from: fuzzy matching on function names, a
snapshot of parsed functions, and a character grid with rectangle layout.

## Installation

```
pip install .
```

## Parsing reference pages

```python
from phpdocbook.parser import parse_function_file

function = parse_function_file(".data/doc-en/reference/array/functions/array-map.xml")
print(function)
```

`phpdocbook.parser.parse_function` takes the XML as bytes, as text, or as an
already parsed lxml element; `parse_function_file` reads it from a path. Both
return one of the classes in `phpdocbook.function`:

- `FunctionDefinition`, with `name`, `short_description`, `return_type`,
  `arguments` (a tuple of `Parameter`) and `description` (a tuple of
  `phpdocbook.types.DescriptionNode`). Its `signature()`, also its `str()`,
  renders a prototype such as `array_map(?callable $callback, array $array, array ...$arrays): array;`.
- `Alias`, for pages whose synopsis has no return type; it holds the page's
  short description.

Type hints are `phpdocbook.types.RegularType` or `UnionType` (printed as
`left|right`); a parameter without a type is `mixed`. Each description node
has a `DescriptionKind` (text, bold, italic, function, constant, parameter,
code, link, note, warning and so on) and a value.

Errors are subclasses of `phpdocbook.parser.XmlError`:

- `ParseError` when the content cannot be parsed as XML or is empty;
- `MalformedXmlDefinition` when a required part, such as a type, is malformed;
- `UnhandledElementError` when a parameter or description holds an element
  the reader does not know, or a parameter has no name.

`parse_function_file` raises `XmlError` itself when the file cannot be read.

## Rewriting entities

The raw manual sources use DocBook entities that an XML parser cannot resolve
on its own. `phpdocbook.entities.replace_entities(text)` turns every entity
other than `&amp;`, `&quot;`, `&gt;` and `&lt;` into a `<constant>` element,
so `&null;` becomes `<constant>null</constant>`.
`replace_entities_in_files(paths)` does the same to each file in place:

```python
from pathlib import Path
from phpdocbook.entities import replace_entities_in_files

replace_entities_in_files(Path(".data").glob("**/functions/**/*.xml"))
```

## Viewer building blocks

- `phpdocbook.fuzzy.fuzzy_indices(choice, pattern)` matches a pattern as a
  subsequence of a name and returns `(score, positions)`, or `None` when it
  does not match. Matching ignores case unless the pattern contains an
  upper-case letter; an empty pattern matches everything.
- `phpdocbook.state.SharedState` holds `parsed_files_snapshot` and
  `total_files_to_parse`. `update_snapshot(functions)` replaces the snapshot
  with a sorted, duplicate-free copy when the number of functions has
  changed, and returns whether it did; `definitions()` yields the
  `FunctionDefinition` entries, leaving aliases out.
- `phpdocbook.canvas.Rect` is a rectangle of cells with `inner(horizontal,
  vertical)` for margins and `split_vertical(*constraints)` /
  `split_horizontal(*constraints)` for layout, where a constraint is an `int`
  length, a `Fraction` share or `None` to fill the rest.
- `phpdocbook.canvas.Canvas(width, height)` is a character grid with
  `write`, `clear`, `draw_box` (with an optional title, returning the inner
  area), `write_wrapped`, `write_centered` and `lines()` to read it back.

## What it does not do

The package installs no command and has no interactive terminal interface:
there is no home screen, search window or key handling, and nothing that
scans a directory and parses files in the background. It supplies the parser
and the pieces listed above; drawing them to a real terminal is left to the
caller.

## Running the tests

```
pip install .[test]
pytest
```