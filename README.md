# fastbox

A small interactive command shell for the console, with a built-in text
editor and a helper for opening SSH sessions. It has no dependencies
beyond the Python standard library.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## The shell

Start it with:

    fastbox

The shell clears the screen, prints a welcome line and then shows a
prompt made of the current directory followed by `>> `. Input is read one
key at a time; Backspace deletes the last character, and the shell ends at
`exit` or at the end of input.

Pressing TAB after `cd ` and the start of a directory name replaces the
text with the first matching subdirectory of the current directory, in
alphabetical order.

Commands:

| Command           | What it does                                          |
|-------------------|-------------------------------------------------------|
| `print 'text'`    | Prints the text between the quotes                    |
| `exec 'cmd'`      | Runs the command through the system shell, then clears the screen |
| `cd DIR`          | Changes the current directory                         |
| `dir` / `ls`      | Lists the current directory with the system's `dir` or `ls` |
| `nano` / `mkfile` | Starts the text editor (`python -m fastbox.editor`)   |
| `cls` / `clear`   | Clears the screen                                     |
| `ssh`             | Starts the SSH launcher (`python -m fastbox.ssh`)     |
| `help`            | Lists the commands                                    |
| `exit`            | Prints `Exiting...` and quits                         |

`print` and `exec` take everything between the first and the last single
quote. Without a pair of quotes they report `Error: Missing quotes.`
Anything else is answered with `Unknown command. Type 'help'.`

The shell can also be driven from code:

```python
import io
from fastbox.shell import Shell

out = io.StringIO()
shell = Shell(cwd=".", out=out, runner=lambda command: 0)
shell.execute("print 'hello'")
print(out.getvalue())          # hello
```

`Shell.execute` returns `False` for `exit` and `True` otherwise; the
`runner` callable receives every external command line and returns its
exit status, with `-1` meaning it could not be started.

## The editor

    fastbox-edit

A line-numbered editor driven by single key presses:

- printable ASCII characters are inserted at the cursor
- Enter splits the line, Backspace deletes a character or joins lines
- the arrow keys move the cursor, wrapping across line ends
- Ctrl+S asks for a file name and saves (adding `.txt` when the name has
  no extension), then starts a fresh, empty document
- Ctrl+O asks for a file name and loads it
- Esc quits

File names are asked for on the terminal; an empty answer cancels.

The editing model is available as `fastbox.editor.Document`:

```python
from fastbox.editor import Document

doc = Document(["hello"])
doc.move_right()
doc.split_line()
text, (column, row) = doc.render()
print(doc.lines)               # ['h', 'ello']
```

`Document.render` returns the screen text and the cursor position on it;
`Document.load` and `Document.save` read and write plain text files, one
line per document line.

## The SSH launcher

    fastbox-ssh

Asks for a user name, a host address and a password (none may be empty),
offers to append `user@host` to `sshconfig.txt` in the current directory,
and then runs `bin/sshpass.exe -ssh -pw <password> <user>@<host>`.

## What it does not do

fastbox does not contain an SSH client of its own. The launcher expects a
plink-compatible client at `bin/sshpass.exe`, relative to the current
directory; when it is missing, the launcher reports
`Failed to start ssh client.`