# medialog

A small terminal program for keeping a list of the media you care about
(movies, books, albums and shows) in a plain CSV file.

Each entry has seven fields, stored one entry per line in this order:

    title,type,author,duration,genre,comment,link

- **type** must be one of `Movie`, `Book`, `Album` or `Show` (case does not matter).
- **link** must start with `http://`, `https://` or `www.`.
- Every other field must contain something other than whitespace.

## Installing

    pip install .

## Running

    medialog [FILE]

If `FILE` is given, entries are read from and written to that file. Without
it you are asked for a file name; press Enter (or type only spaces) to use
the default, `full_media_list.csv`.

The main menu offers:

1. **Saving Mode**, with a sub-menu:
   1. *Create New Entry*: asks for each field in turn, repeating a question
      until the answer is valid, then appends the entry to the file.
   2. *Edit Existing Entry*: lists the entries, asks for a number (0 cancels),
      then shows each field and asks for a new value. An empty or invalid
      answer keeps the current value.
   3. *Delete Entry*: lists the entries, asks for a number (0 cancels) and
      asks for confirmation; an answer starting with `y` or `Y` deletes.
   4. *Return to Main Menu*.
2. **Reading Mode**: pick a field (1 Title, 2 Type, 3 Author,
   4 Duration/Pages, 5 Genre, 6 Comment, 7 Link), type a search term, and
   step through the entries whose field contains that term, ignoring case
   and surrounding whitespace. After each match, `1` shows the next one and
   `2` leaves reading mode. An empty term matches every entry.
3. **Exit**.

A non-numeric answer at the main menu, or the end of input, ends the program.

## Using it from Python

The file format and searching live in `medialog.entries`:

```python
from medialog.entries import Field, load_entries, search_entries

entries = load_entries("full_media_list.csv")
for entry in search_entries(entries, Field.GENRE, "drama"):
    print(entry.title, entry.value(Field.AUTHOR))
```

- `MediaEntry` is a dataclass with the seven fields; `to_line()` gives its
  stored form and `value(field)` reads a field by `Field` member.
- `parse_line` turns one stored line into a `MediaEntry`, or `None` if it is
  malformed. `load_entries` reads a whole file, skipping malformed lines.
- `append_entry` adds one entry to a file; `write_entries` replaces a file's
  contents.
- `is_nonblank`, `is_valid_media_type` and `is_valid_link` are the checks the
  interactive prompts apply.

The prompts themselves are in `medialog.interactive`: `save_entry`,
`edit_entry`, `read_entries` and `delete_entry` each take a file path and a
`Console`, which reads from and writes to any text streams (standard input
and output by default). `medialog.cli.run(console, filename)` runs the main
menu on a given console.

## Limitations

- Fields are written as they are, with no quoting. A comma in any field but
  the last splits the line differently when it is read back, and a field
  longer than 255 characters is cut when read; a line that no longer has
  seven fields is skipped.
- Editing and deleting rewrite the whole file from the entries that could be
  read, and keep at most the first 1000 of them. Malformed lines, and
  entries past the 1000th, are dropped from the file by either operation.

## Running the tests

    pip install .[test]
    pytest