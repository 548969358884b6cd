"""Executable Textual app that hosts an editing session."""

from __future__ import annotations

from typing import Optional

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from lined.buffer import BufferMirror, SelectionShape
from lined.session import EditorSession, SessionView

from .controller import TextualEditorAdapter, TextualUIHooks

CURSOR_STYLE = "reverse"
SELECTION_STYLE = "black on cyan"
GUTTER_STYLE = "dim"


def render_lines(view: SessionView) -> Text:
    """Render the visible rows with a line-number gutter, selection and cursor."""

    total = len(view.lines)
    width = len(str(total))
    out = Text(no_wrap=True, overflow="crop")
    cursor_row, cursor_col = view.cursor
    selection = view.selection
    for row in range(view.offset, min(total, view.offset + view.visible_rows)):
        if row > view.offset:
            out.append("\n")
        out.append(f"{row + 1:>{width}} ", style=GUTTER_STYLE)
        line = view.lines[row]
        body = Text(line)
        if selection is not None and selection.row_lo <= row <= selection.row_hi:
            if selection.shape is SelectionShape.LINE:
                start, end = 0, len(line)
            else:
                start, end = selection.column_span(len(line))
            if end > start:
                body.stylize(SELECTION_STYLE, start, end)
        if row == cursor_row:
            if cursor_col < len(line):
                body.stylize(CURSOR_STYLE, cursor_col, cursor_col + 1)
            else:
                body.append(" ", style=CURSOR_STYLE)
        out.append_text(body)
    return out


def status_line(view: SessionView) -> str:
    row, col = view.cursor
    return (
        f"Mode: {view.mode.upper()} | Pos: ({row + 1},{col + 1}) | "
        f"File: {view.file_name}"
    )


def command_line(view: SessionView) -> str:
    if view.command_text or view.mode == "command":
        return f":{view.command_text}"
    return view.status or ""


class LinedApp(App[None]):
    """Full-screen editor: text area, status bar, and command line."""

    CSS = """
    Screen {
        layout: vertical;
    }

    #buffer-view {
        height: 1fr;
        overflow: hidden;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }

    #command-line {
        height: 1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._command_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        self._command_widget = Static("", id="command-line")
        yield self._buffer_widget
        yield self._status_widget
        yield self._command_widget

    def on_mount(self) -> None:
        self.session.resize(self.size.height, self.size.width)
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            on_quit=self.exit,
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        self._repaint()

    def on_resize(self, event: events.Resize) -> None:
        self.session.resize(event.size.height, event.size.width)
        self._repaint()

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key in {"ctrl+c", "ctrl+q"}:
            return
        self.adapter.handle_textual_key(event.key, text=event.character)
        event.stop()
        self._repaint()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        del mirror
        self._repaint()

    def _repaint(self, view: Optional[SessionView] = None) -> None:
        view = view or self.session.view()
        if self._buffer_widget:
            self._buffer_widget.update(render_lines(view))
        if self._status_widget:
            self._status_widget.update(Text(status_line(view)))
        if self._command_widget:
            self._command_widget.update(Text(command_line(view)))


__all__ = ["LinedApp", "render_lines", "status_line", "command_line"]
