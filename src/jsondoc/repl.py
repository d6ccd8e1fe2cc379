"""JsonRepl — line-oriented driver for building documents interactively.

Also provides the ``jsondoc-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import logging
import shlex
import sys
from typing import IO

from .config import Config
from .dispatcher import Method
from .document import JsonDocument, JsonObject
from .errors import JsonDocError
from .values import ValueType

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# JsonRepl class (programmatic use)
# ---------------------------------------------------------------------------

class JsonRepl:
    """Stateful session binding variable names to objects.

    Usage::

        repl = JsonRepl()
        repl.eval("new h")
        repl.eval("h set a string hi")
        repl.eval("h add c integer 1")
        repl.eval("h set child object kid")
        repl.eval("kid set x integer 1")
        repl.eval("h encode")   # → '{ "a":"hi","c":[ 1 ],"child":{ "x":1 } }\\n'
        repl.eval("h destroy")  # unbinds h and kid
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.reset()

    def reset(self) -> None:
        """Drop every object and variable."""
        self.doc = JsonDocument(self.config)
        self.vars: dict[str, JsonObject] = {}

    def eval(self, text: str, dest: IO[str] | None = None) -> str | None:
        """Run one command.

        ``encode``, ``keys`` and ``get`` write their output to *dest*
        (stdout by default) and also return it; other commands return ``None``.
        """
        words = shlex.split(text)
        if not words:
            return None

        if words[0] == "new":
            if len(words) != 2:
                raise JsonDocError("usage: new <var>")
            self.vars[words[1]] = self.doc.construct()
            return None

        if len(words) < 2:
            raise JsonDocError(f"no method given for {words[0]!r}")
        obj = self._lookup(words[0])
        method = Method.parse(words[1])
        args = words[2:]

        if method in (Method.ADD, Method.SET):
            self._write(obj, method, args)
            return None
        if method is Method.ENCODE:
            return obj.encode(dest)
        if method is Method.DESTROY:
            obj.destroy()
            self._unbind_dead()
            return None
        if method is Method.KEYS:
            return _emit(" ".join(obj.keys()), dest)
        if method is Method.GET:
            if len(args) != 1:
                raise JsonDocError("usage: <var> get <name>")
            return _emit(" ".join(str(v) for v in obj.get(args[0])), dest)
        raise JsonDocError(f"method not available here: {method.value}")

    def _write(self, obj: JsonObject, method: Method, args: list[str]) -> None:
        if not 2 <= len(args) <= 3:
            raise JsonDocError(f"usage: <var> {method.value} <name> <type> [<value>]")
        name, vtype = args[0], args[1]
        value = args[2] if len(args) == 3 else None

        if ValueType.parse(vtype) is ValueType.OBJECT:
            if value is None:
                raise JsonDocError("object values need a variable name to bind the child to")
            self.vars[value] = obj(method, name, vtype)
        else:
            obj(method, name, vtype, value)

    def _lookup(self, name: str) -> JsonObject:
        try:
            return self.vars[name]
        except KeyError:
            raise JsonDocError(f"undefined variable: {name}") from None

    def _unbind_dead(self) -> None:
        for name in [n for n, o in self.vars.items() if not o.live]:
            del self.vars[name]


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _emit(text: str, dest: IO[str] | None) -> str:
    print(text, file=dest if dest is not None else sys.stdout)
    return text


def _show_vars(repl: JsonRepl, dest: IO[str]) -> None:
    if not repl.vars:
        print("  (no variables defined)", file=dest)
        return
    width = max(len(k) for k in repl.vars)
    for name, obj in repl.vars.items():
        print(f"  {name:<{width}} : {obj.handle}", file=dest)


def _run_batch(repl: JsonRepl, filepath: str, dest: IO[str]) -> None:
    try:
        with open(filepath, encoding="utf-8") as fh:
            for file_line in fh:
                _process_line(repl, file_line.rstrip("\n"), dest)
    except OSError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)


def _process_line(repl: JsonRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line or line.startswith("#"):
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":vars":
        _show_vars(repl, dest)
        return True

    if line == ":reset":
        repl.reset()
        return True

    if line.startswith("?<< "):
        _run_batch(repl, line[4:].strip(), dest)
        return True

    # ── Engine commands ───────────────────────────────────────────────────
    try:
        repl.eval(line, dest)
    except (JsonDocError, ValueError) as exc:
        logger.debug("command failed: %s", line, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
    return True


class _Output:
    """Where command output goes: stdout, or a file chosen with ``?>> <file>``."""

    def __init__(self) -> None:
        self.dest: IO[str] = sys.stdout
        self._file: IO[str] | None = None

    def redirect(self, filepath: str) -> None:
        """Send output to *filepath*; an empty path switches back to stdout."""
        self.close()
        if not filepath:
            return
        try:
            self._file = open(filepath, "w", encoding="utf-8")
        except OSError as exc:
            print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
            return
        self.dest = self._file

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
        self.dest = sys.stdout

    def __enter__(self) -> "_Output":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    """Interactive shell (``jsondoc-repl`` / ``python -m jsondoc.repl``).

    Any file arguments are run as batches instead of starting a session.
    """
    config = Config.from_env()
    logging.basicConfig(level=config.log_level)
    repl = JsonRepl(config)
    args = sys.argv[1:] if argv is None else argv

    if args:
        for filepath in args:
            _run_batch(repl, filepath, sys.stdout)
        return

    print("jsondoc REPL  (:q to quit  |  :vars  :reset  |  ?>> <file>  |  new <var>  <var> add|set|encode|destroy ...)")

    with _Output() as out:
        while True:
            try:
                line = input("JSON> ").strip()
            except EOFError:
                print()
                break
            except KeyboardInterrupt:
                print()
                continue

            if line.startswith("?>>"):
                out.redirect(line[3:].strip())
            elif line and not _process_line(repl, line, out.dest):
                break

if __name__ == "__main__":
    main()
