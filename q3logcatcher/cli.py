"""Command line entry point: read a log file or follow a container and store games."""

from __future__ import annotations

import argparse
import re
import sys

from q3logcatcher.api import DockerApiError, DockerClient
from q3logcatcher.catcher import Catcher, CatcherError
from q3logcatcher.logfile import LogfileClient

REVISION = "unknown"

_UNITS = {"ns": 1e-9, "us": 1e-6, "\u00b5s": 1e-6, "\u03bcs": 1e-6,
          "ms": 1e-3, "s": 1.0, "m": 60.0, "h": 3600.0}
_DURATION_RE = re.compile(r"([-+]?)((?:(?:\d+(?:\.\d*)?|\.\d+)(?:ns|us|\u00b5s|\u03bcs|ms|s|m|h))+|0)")
_PART_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|\u00b5s|\u03bcs|ms|s|m|h)")


def parse_duration(text: str) -> float:
    """Parse a duration such as ``10s``, ``1h30m`` or ``250ms`` into seconds."""
    match = _DURATION_RE.fullmatch(text)
    if match is None:
        raise ValueError(f'time: invalid duration "{text}"')
    sign, body = match.groups()
    total = sum(float(n) * _UNITS[u] for n, u in _PART_RE.findall(body))
    return -total if sign == "-" else total


def build_parser() -> argparse.ArgumentParser:
    """Return the command line parser."""
    parser = argparse.ArgumentParser(prog="q3logcatcher")
    parser.add_argument("--dbconn", required=True, help="Database connection.")
    parser.add_argument("--dbname", default="quake3", help="Database name.")
    parser.add_argument("--path", required=True, help="Path to the docker socket or logfile.")
    parser.add_argument("--socket", action="store_true", help="Use socket connection or parse logfile.")
    parser.add_argument("--container", default="quake3-server", help="Container name.")
    parser.add_argument("--interval", type=parse_duration, default="10s",
                        help="Interval for api client runner.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the log catcher; return the process exit status."""
    print("Revision:", REVISION)
    args = build_parser().parse_args(argv)
    stage = "NewClient"
    try:
        if args.socket:
            client: LogfileClient | DockerClient = DockerClient(args.path, args.container, args.interval)
        else:
            client = LogfileClient(args.path)
        stage = "catcher.New"
        catcher = Catcher.connect(args.dbconn, args.dbname)
        stage = "client.Run"
        client.run(catcher)
    except (OSError, CatcherError, DockerApiError) as exc:
        print(f"[ERROR] {stage}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())