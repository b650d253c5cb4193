#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Script: main.py
Location: src/hydronic_planner/main.py

Description:
    Command-line entry point for the hydronic planner. Reads a project
    layout, routes supply/return pipes from the boiler to every radiator,
    sizes them from the radiator loads and writes the pipe network.

Usage:
    python -m hydronic_planner.main layout.json --output pipes.json
"""

import argparse
import json
import logging
import sys

from hydronic_planner.config.routing import RoutingConfig
from hydronic_planner.routing.auto_router import generate_auto_pipes
from hydronic_planner.sizing.dimensioning import dimension_pipes
from hydronic_planner.utils.logging_config import HydronicPlannerLogger
from hydronic_planner.utils.serialization import load_layout

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Automatic pipe routing and sizing for hydronic heating layouts"
    )
    parser.add_argument(
        "layout",
        help="Project JSON with 'radiators' and 'boilers'"
    )
    parser.add_argument(
        "--output", "-o",
        help="Write the resulting pipes to this file (default: stdout)"
    )
    parser.add_argument(
        "--no-dimension",
        action="store_true",
        help="Skip the dimensioning pass"
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        help="Override the pathfinding iteration budget"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--log-dir",
        default="logs",
        help="Directory for log files (default: logs)"
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Log to the console only"
    )
    return parser.parse_args(argv)


def run(args) -> dict:
    """Route and size the layout described by ``args``."""
    with open(args.layout, "r", encoding="utf-8") as f:
        layout = load_layout(json.load(f))

    if args.max_iterations is not None:
        config = RoutingConfig(max_iterations=args.max_iterations)
    else:
        config = RoutingConfig()

    logger.info(
        f"Loaded {len(layout.emitters)} radiators and "
        f"{len(layout.sources)} boilers from {args.layout}"
    )

    result = generate_auto_pipes(layout.emitters, layout.sources, config)
    pipes = result.pipes
    if pipes and not args.no_dimension:
        pipes = dimension_pipes(pipes, layout.emitters, layout.sources, config)

    return {
        "pipes": [p.to_dict() for p in pipes],
        "warnings": result.warnings,
        "statistics": result.statistics.to_dict(),
    }


def main(argv=None) -> int:
    args = parse_arguments(argv)
    HydronicPlannerLogger.configure(
        debug_mode=args.debug,
        log_dir=args.log_dir,
        log_to_file=not args.no_log_file,
    )

    try:
        output = run(args)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to process {args.layout}: {e}")
        return 1

    text = json.dumps(output, indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info(f"Wrote {len(output['pipes'])} pipes to {args.output}")
    else:
        print(text)

    for warning in output["warnings"]:
        logger.warning(warning)
    return 0


if __name__ == "__main__":
    sys.exit(main())
