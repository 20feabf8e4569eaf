#!/usr/bin/env python3
"""
Run auto-create-table for a DataX-style job file.

Usage:
    python main.py <job.json>

The job file is expected to hold ``job.content[0].reader.parameter`` and
``job.content[0].writer.parameter``. Exit codes: 0 on success or when
auto-create is off, 1 on an auto-create failure, 2 on usage errors.
"""
from __future__ import annotations

import sys

from config import CONFIG
from core.auto_create import create_table
from errors import AutoCreateTableError
from logger import get_logger
from models.configuration import Configuration

log = get_logger(__name__)

READER_PARAMETER = "job.content[0].reader.parameter"
WRITER_PARAMETER = "job.content[0].writer.parameter"

USAGE = f"""
{CONFIG.app_name} {CONFIG.app_version}

Usage:
    python main.py <job.json>
"""


def run(job_path: str) -> int:
    try:
        job = Configuration.from_file(job_path)
        reader_conf = job.get_configuration(READER_PARAMETER)
        writer_conf = job.get_configuration(WRITER_PARAMETER)
        if reader_conf is None or writer_conf is None:
            print(f"✗ {job_path}: job needs both reader and writer parameters")
            return 1
        created = create_table(reader_conf, writer_conf)
    except AutoCreateTableError as exc:
        log.error("Auto-create failed: %s", exc)
        print(f"✗ {exc}")
        return 1

    if created:
        print("✓ Writer table is in place")
    else:
        print("autoCreateTable is off, nothing to do")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1 or args[0] in ("-h", "--help"):
        print(USAGE)
        return 2
    return run(args[0])


if __name__ == "__main__":
    sys.exit(main())
