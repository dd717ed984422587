# sheets

Lazy rows and sheets (rows of rows) built on Python iterators. The package
also has helpers for making and combining sequences, scanners that split text
into tokens, line readers for files and folders, and a matcher for simple SQL
statements.

## Install

```
pip install .
pip install ".[test]"   # adds pytest for running the tests
```

## Sequences

`sheets.sequences` works on any iterable and returns lazy `Seq` objects. A
`Seq` starts a fresh pass over its sources each time it is iterated, so it can
be iterated more than once when its sources can.

```python
from sheets.sequences import limit, concat, until, filtered, same, matched
from sheets.numbers import odds, evens, totalise, between, runes

list(limit(odds(), 5))                        # [1, 3, 5, 7, 9]
list(limit(concat(limit(odds(), 4), evens()), 8))
                                              # [1, 3, 5, 7, 0, 2, 4, 6]
list(until(lambda n: n > 10, odds()))         # [1, 3, 5, 7, 9, 11]
list(limit(filtered(between(10, 100), odds()), 3))  # [11, 13, 15]
list(limit(totalise(odds()), 4))              # [1, 4, 9, 16]
same(runes("hello"), runes("hello"))          # True
matched(runes("hello"), runes("hello there")) # True: extra items are not read
```

Other combinators include `after`, `step`, `sub`, `interlace`, `combine`,
`repeat`, `repeat_sequence`, `make`, `apply`, `append`, `prepend`, `delimit`,
`interleave` and `split`. `sheets.numbers` adds `geometric`, `fibonacci`,
`multiply`, `divide` and integer stripe predicates (`start_striper`,
`dash_striper`, `half_striper`, `third_striper`, `multi_striper`, `invert`,
`modify`).

## Rows and sheets

```python
from sheets.row import new_row
from sheets.sheet import new_sheet, select_rows

row = new_row(0, 1, 2, 3, 4, 5, 6, 7, 8, 9)
row.at(6)                           # 6
format(row.sample((4, 2)), "")      # "468"
format(row.select(2, 7, 2, 7), "")  # "1616"
format(row, ",")                    # "0,1,2,3,4,5,6,7,8,9"

sheet = new_sheet(new_row(1, 2, 3), new_row(4, 5, 6), new_row(3, 2, 1))
format(sheet.column(2), "\t")           # "2\t5\t2"
format(select_rows(sheet, 1, 2), "\n")  # "123\n321"
```

A format spec that is one of the separators tab, newline, `,`, `.`, `/`, `\`
or `|` joins the items with it; any other spec is applied to each item in
turn. `Row.sprintf` turns a row into a row of strings, using one printf-style
template for the first item, another for the rest, and an optional sequence of
per-column formatters:

```python
str(new_row(1, 2, "hi").sprintf("%10s", "|%10s"))
# "         1|         2|        hi"
```

`sheets.sheet` also has `compare_sheets`, `select_matched_rows`,
`select_rows_from` and friends, `HeadedSheet`, `new_headed_sheet` with
`fields` (name/value pairs of a dataclass, named tuple or plain object),
and grouping with `group_by` and `group_by2`.

## Scanners and files

```python
import io
from sheets.scanners import scan, rune_sep_func, before_string, trim
from sheets.files import line_scanner

list(scan(io.StringIO(" 1 , 2 ## note"), rune_sep_func(",", before_string("##"), trim)))
# ["1", "2"]

with open("data.csv", encoding="utf-8") as handle:
    lines = list(line_scanner(handle))   # lines with "//" comments removed
```

`scan` takes a text stream or a string. `sheets.files` also reads
directories (`folder_scanner`, `dir_scanner`, `dir_readers`), named files
(`files_scanner`) and glob matches (`glob_scanner`); each file comes back as
its name paired with an iterator over its lines.

## SQL statements

`sheets.sql.match_statement` picks apart simple
`SELECT`/`DELETE`/`UPDATE`/`INSERT INTO … FROM … WHERE …` statements into a
`Statement` (command, columns, table, condition, limit), or returns None.
`is_reserved` reports whether a word or phrase is a reserved SQL keyword.

## What it does not do

The package only recognises the shape of a statement. It does not run SQL,
store tables, or connect to any database, and it has no command-line tool.