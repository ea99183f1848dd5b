from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable
from pathlib import Path

from dotenv import load_dotenv

from contact_batcher.cli.prompts import PromptCancelled, ask, ask_yes_no, pick_excel_file
from contact_batcher.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from contact_batcher.excel.reader import preview_frame
from contact_batcher.logging.init import enable_debug, log_summary, setup_logging
from contact_batcher.services.orchestrator import (
    AnnotationError,
    DetectionError,
    ExportWriteError,
    InputError,
    LoadedSource,
    load_source,
    process,
)
from contact_batcher.services.range_selector import parse_row_number
from contact_batcher.services.records import FIRST_DATA_ROW
from contact_batcher.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load .env and config
- Collect run options (file, start row, end row) from flags or prompts
- Run the pipeline; the overwrite question is asked only on collisions
- Print the SUMMARY line

Exit codes: 0 success or no-op range, 1 fatal, 2 annotation failed after export.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_ANNOTATION_FAILED = 2

CONFIG_ENV_VAR = "CONTACT_BATCHER_CONFIG"


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv (process environment wins by default)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Split a contact spreadsheet into phone batches and mark the source rows"
    )
    p.add_argument("--file", type=Path, help="Source Excel file (prompted when omitted)")
    p.add_argument("--start", help="First worksheet row to process (default: prompt, fallback 2)")
    p.add_argument(
        "--end",
        help="Last worksheet row to process (default: last row; prompted only when --start is omitted too)",
    )
    overwrite = p.add_mutually_exclusive_group()
    overwrite.add_argument(
        "--overwrite", dest="overwrite", action="store_true", default=None,
        help="Overwrite existing export files without asking",
    )
    overwrite.add_argument(
        "--no-overwrite", dest="overwrite", action="store_false",
        help="Never overwrite; number new files past existing ones",
    )
    p.add_argument("--config", type=Path, help=f"Config YAML (default: {DEFAULT_CONFIG_PATH})")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument(
        "--inspect-data", action="store_true",
        help="Print headers, detected columns and first rows then exit",
    )
    return p.parse_args(argv)


def _inspect_data(loaded: LoadedSource) -> int:
    print(f"FILE: {loaded.path.name}")
    print(f"  SHEET: {loaded.sheet.sheet_name} (of {loaded.sheet.sheet_names})")
    print(f"  headers={loaded.sheet.headers}")
    cols = loaded.columns
    print(f"  name_column={cols.name.index + 1} ({cols.name.reason})")
    print(f"  phone_column={cols.phone.index + 1} ({cols.phone.reason})")
    print(f"  records={len(loaded.records)} max_row={loaded.max_row}")
    print(preview_frame(loaded.sheet).to_string())
    return EXIT_SUCCESS


def _start_past_data(start: str, loaded: LoadedSource) -> bool:
    """True when the start answer already selects nothing (no end prompt needed)."""
    row = parse_row_number(start)
    if row is None or row < FIRST_DATA_ROW:
        row = FIRST_DATA_ROW
    return row - FIRST_DATA_ROW >= len(loaded.records)


def main(argv: list[str] | None = None, input_func: Callable[[str], str] = input) -> int:
    logger = setup_logging()

    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        enable_debug(logger)
        logger.debug("debug mode enabled")

    env_config = os.getenv(CONFIG_ENV_VAR)
    try:
        if args.config is not None:
            cfg = load_config(args.config)
        elif env_config:
            cfg = load_config(Path(env_config))
        else:
            cfg = load_config(DEFAULT_CONFIG_PATH, required=False)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    try:
        source = args.file
        if source is None:
            source = pick_excel_file(Path.cwd(), cfg.excluded_directories, input_func)
        logger.info(f"source file: {source}")

        try:
            loaded = load_source(source, cfg)
        except DetectionError as e:
            logger.error("required columns not detected from headers")
            logger.error(f"headers found: {e.headers}")
            return EXIT_FATAL
        except InputError as e:
            logger.error(f"input: {e}")
            return EXIT_FATAL

        if args.inspect_data:
            return _inspect_data(loaded)

        logger.info("worksheet row 2 is the first data row")
        start = args.start
        if start is None:
            start = ask("First worksheet row to process (e.g. 2, 1400): ", input_func)
        end = args.end
        if end is None and args.start is None and not _start_past_data(start, loaded):
            end = ask(
                f"Last worksheet row to process (Enter = last, max {loaded.max_row}): ",
                input_func,
            )

        if args.overwrite is not None:
            overwrite_flag = args.overwrite

            def confirm(_paths: list[Path]) -> bool:
                return overwrite_flag
        else:

            def confirm(_paths: list[Path]) -> bool:
                return ask_yes_no(
                    "Files for this source/date/range already exist. Overwrite them? (S/N): ",
                    input_func,
                )

        try:
            result = process(loaded, start, end, cfg, confirm)
        except ExportWriteError as e:
            logger.error(f"export: {e}")
            return EXIT_FATAL
        except AnnotationError as e:
            logger.error(f"annotation: {e}")
            logger.error("exported files were kept; re-run to annotate the source file")
            return EXIT_ANNOTATION_FAILED
    except PromptCancelled as e:
        logger.error(f"{e}")
        return EXIT_FATAL

    summary_line = render_summary_line(result)
    # log_summary adds the "SUMMARY " prefix itself
    log_summary(summary_line[len("SUMMARY "):])
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
