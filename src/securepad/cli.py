"""Command-line entry point: password gate, then the editor."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from securepad.auth import CredentialError, CredentialGate
from securepad.config import LOG_PRESETS, UI_CHOICES, SecurePadConfig
from securepad.runtime import telemetry
from securepad.runtime.autosave import AutosaveTimer
from securepad.runtime.loop import EditorLoop
from securepad.runtime.surface import SurfaceError
from securepad.storage import CredentialStore, NoteStore


def _parse_args(
    argv: Optional[Sequence[str]], defaults: SecurePadConfig
) -> SecurePadConfig:
    parser = argparse.ArgumentParser(
        prog="securepad", description="Password-protected terminal notepad."
    )
    parser.add_argument(
        "--notes-file",
        default=defaults.notes_path,
        help=f"Notes file to edit (default: {defaults.notes_path})",
    )
    parser.add_argument(
        "--password-file",
        default=defaults.password_path,
        help=f"Password hash file (default: {defaults.password_path})",
    )
    parser.add_argument(
        "--autosave-interval",
        type=float,
        default=defaults.autosave_interval,
        help="Seconds between autosaves of unsaved changes (default: %(default)s)",
    )
    parser.add_argument(
        "--ui",
        choices=UI_CHOICES,
        default=defaults.ui,
        help="Terminal front-end (default: %(default)s)",
    )
    parser.add_argument(
        "--log-preset",
        choices=LOG_PRESETS,
        default=defaults.log_preset,
        help="telelog preset; logs always go to a file, never the screen",
    )
    args = parser.parse_args(argv)
    if args.autosave_interval <= 0:
        parser.error("--autosave-interval must be positive")
    return SecurePadConfig(
        notes_path=args.notes_file,
        password_path=args.password_file,
        autosave_interval=args.autosave_interval,
        poll_interval=defaults.poll_interval,
        ui=args.ui,
        log_preset=args.log_preset,
    )


def build_loop(config: SecurePadConfig) -> EditorLoop:
    return EditorLoop.open(
        NoteStore(config.notes_path),
        timer=AutosaveTimer(config.autosave_interval),
        poll_interval=config.poll_interval,
    )


def run_editor(config: SecurePadConfig) -> int:
    loop = build_loop(config)
    if config.ui == "curses":
        from securepad.adapters.curses import CursesSurface

        loop.run(CursesSurface())
        return 0

    from securepad.adapters.textual.app import run_textual

    return run_textual(loop) or 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = _parse_args(argv, SecurePadConfig.from_env())
    if config.log_preset:
        telemetry.configure(preset=config.log_preset)

    gate = CredentialGate(CredentialStore(config.password_path))
    try:
        if not gate.run():
            print("Invalid password. Exiting.")
            return 1
    except CredentialError as exc:
        print(f"securepad: {exc}", file=sys.stderr)
        return 1

    try:
        return run_editor(config)
    except (SurfaceError, OSError) as exc:
        telemetry.record_event("editor.fatal", level="error", data={"error": str(exc)})
        print(f"securepad: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover - manual entry
    sys.exit(main())
