# src/erf_client/runtime/cli.py

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import Sequence

from .env import refresh_seconds_from_env, settings_from_env
from .settings import DEFAULT_REFRESH_SECONDS, FingerprintSettings
from ..domain.exceptions import FingerprintError
from ..integrations.common.client_factory import new_manager


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the current ephemeral client fingerprint, rotating it if expired",
    )

    parser.add_argument(
        "--token-file",
        "-f",
        help="Path of the token file (default: env ERF_TOKEN_FILE).",
    )
    parser.add_argument(
        "--refresh",
        "-r",
        type=int,
        help="Seconds before the fingerprint rotates "
             "(default: env ERF_REFRESH_SECONDS, else "
             f"{DEFAULT_REFRESH_SECONDS}).",
    )
    parser.add_argument(
        "--claims",
        action="store_true",
        help="Print the decoded claims as JSON instead of the raw token.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log loads and rotations to stderr.",
    )

    return parser.parse_args(args=argv)


def _settings(args: argparse.Namespace) -> FingerprintSettings:
    if args.token_file:
        settings = FingerprintSettings(
            token_file=args.token_file,
            refresh_seconds=refresh_seconds_from_env(),
        )
    else:
        settings = settings_from_env()

    if args.refresh is not None:
        settings.refresh_seconds = args.refresh
    return settings


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = _settings(args)
        manager = new_manager(settings.token_path, settings.refresh_seconds)
        token = manager.current_token()
    except (FingerprintError, RuntimeError, ValueError) as exc:
        json.dump({"ok": False, "error": str(exc)}, sys.stdout, indent=2)
        sys.stdout.write("\n")
        raise SystemExit(1) from exc

    if args.claims:
        json.dump(asdict(manager.claims), sys.stdout, indent=2)
    else:
        sys.stdout.write(token.decode("ascii"))
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
