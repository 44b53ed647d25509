"""CLI for the student grade pipeline."""

import argparse
from pathlib import Path

import yaml

from .core.engine import run_pipeline
from .report import ConsoleWriter
from .utils import setup_logging, get_logger


def _load_config(config_path: str | Path | None) -> dict:
    path = Path(config_path or "configs/default.yaml")
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the letter grade for each student in an Excel score sheet.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="",
        help="Path to the student workbook (prompted for when omitted)",
    )
    parser.add_argument(
        "-c", "--config",
        default="configs/default.yaml",
        help="Path to YAML config file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Set log level to DEBUG",
    )
    args = parser.parse_args(argv)

    config = _load_config(args.config)
    if args.verbose:
        config["logging"] = {**(config.get("logging") or {}), "level": "DEBUG"}

    setup_logging(config.get("logging") or {})
    log = get_logger(__name__)

    out = ConsoleWriter()
    out.banner()
    try:
        run_pipeline([args.path], config=config, out=out)
    except Exception as e:
        log.exception("Grading failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
