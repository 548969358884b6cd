"""Process entry: ``python -m lined <path>``."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from lined.runtime import telemetry
from lined.runtime.config import EditorConfig
from lined.session import EditorSession


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lined", description="Edit a plain-text file with vi-style keys."
    )
    parser.add_argument("path", help="File to edit; created on first save if missing")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    session = EditorSession.open(args.path, config=EditorConfig.from_env())
    telemetry.record_event(
        "session.open",
        data={"path": args.path, "lines": session.buffer.line_count},
    )

    from lined.adapters.textual.app import LinedApp

    LinedApp(session).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry
    raise SystemExit(main())
