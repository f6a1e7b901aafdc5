"""Rich console handler for structured RPC log records.

Where: platform/logging/handlers.py
What: Render ``rpc_event`` records (request, response, failure) with icons and colour.
Why: Keep console formatting out of the RPC code paths that emit the records.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override
from urllib.parse import urlsplit

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class RpcRichHandler(RichHandler):
    """Rich handler that styles RPC request and response events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "rpc.request": ("📡", "cyan"),
        "rpc.response": ("✅", "green"),
        "rpc.error": ("❌", "red"),
    }
    _QUERY_LIMIT: ClassVar[int] = 80

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact console settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_url(self, url: str) -> Text:
        """Render the endpoint dimmed and the query string highlighted."""

        parts = urlsplit(url)
        text = Text()
        endpoint = f"{parts.netloc}{parts.path}" if parts.netloc else parts.path
        _ = text.append(endpoint, style=Style(color="white", dim=True))
        if parts.query:
            query = parts.query
            if len(query) > self._QUERY_LIMIT:
                query = query[: self._QUERY_LIMIT] + "…"
            _ = text.append("?", style=Style(color="magenta"))
            _ = text.append(query, style=Style(color="white"))
        return text

    def _render_rpc_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured RPC events; other records fall through."""

        event = getattr(record, "rpc_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        operation = getattr(record, "operation", None)
        if isinstance(operation, str) and operation:
            _ = body.append(f"[{operation}] ")

        if event == "rpc.request":
            _ = body.append("GET ")
            url = getattr(record, "url", None)
            if url:
                _ = body.append_text(self._format_url(str(url)))
        elif event == "rpc.response":
            status = getattr(record, "status", None)
            _ = body.append("Response")
            details: list[str] = []
            if isinstance(status, int):
                details.append(f"status={status}")
            count = getattr(record, "result_count", None)
            if isinstance(count, int):
                details.append(f"results={count}")
            if details:
                _ = body.append(" [" + ", ".join(details) + "]")
        else:
            kind = getattr(record, "error_kind", None)
            _ = body.append("Failed")
            if kind:
                _ = body.append(f" ({kind})")
            message = record.getMessage()
            if message:
                _ = body.append(f": {message}")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for RPC events."""

        rpc_text = self._render_rpc_message(record)
        if rpc_text is not None:
            return rpc_text

        return super().render_message(record, message)


__all__ = ["RpcRichHandler"]
