"""Where: src/aurrpc/platform/http/json_parser.py
What: Standard-library JSON parser adapter.
Why: Translate decoder failures into ParseError, EncodingError, or IoError.
"""

from __future__ import annotations

import json
from typing import Any, BinaryIO, NoReturn

from aurrpc.domain.errors import EncodingError, IoError, ParseError


def _reject_constant(name: str) -> NoReturn:
    # json accepts NaN and Infinity by default; they are not valid JSON.
    raise ValueError(f"Invalid JSON constant: {name}")


class JsonStreamParser:
    """Parse a complete byte stream with ``json.loads``."""

    def parse(self, stream: BinaryIO) -> Any:
        try:
            raw = stream.read()
        except OSError as exc:
            raise IoError(str(exc)) from exc

        try:
            return json.loads(raw, parse_constant=_reject_constant)
        except json.JSONDecodeError as exc:
            raise ParseError(exc.msg, exc.lineno, exc.colno) from exc
        except UnicodeDecodeError as exc:
            raise EncodingError(str(exc)) from exc
        except ValueError as exc:
            raise ParseError(str(exc), 0, 0) from exc
        except RecursionError as exc:
            # Nesting deeper than the interpreter's recursion limit.
            raise ParseError(str(exc), 0, 0) from exc


__all__ = ["JsonStreamParser"]
