#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command line entry point: print this machine's system information as JSON.

    python -m systeminfo_lite --indent 2
    python -m systeminfo_lite --section gpu --gpu-strategy lshw
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import load_config
from .hardware.system_info import system_info

SECTIONS = ("cpu", "gpu", "ram", "os")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="systeminfo-lite",
        description="Report CPU, GPU, RAM and OS information as JSON.",
    )
    parser.add_argument("--indent", type=int, default=4, help="JSON indentation (default: 4)")
    parser.add_argument("--section", choices=SECTIONS, help="Print only one part of the record")
    parser.add_argument(
        "--gpu-strategy",
        choices=("auto", "nvidia-smi", "lshw"),
        help="Linux GPU tool policy (default: SYSINFO_LITE_LINUX_GPU_STRATEGY or auto)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log detection steps to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function to run detection and print the result as a JSON object.

    Returns:
        Process exit status: 0 on success, 2 for invalid settings
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(linux_gpu_strategy=args.gpu_strategy)
    except ValidationError as e:
        print(f"systeminfo-lite: invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, config.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    info = system_info(config).to_dict()
    if args.section:
        # An absent gpu list prints as an empty list
        payload = info.get(args.section, [])
    else:
        payload = info

    print(json.dumps(payload, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
