#!/usr/bin/env python3
"""Discover the account's MediaConvert endpoint and print it (optionally save MEDIACONVERT_ENDPOINT in root .env)."""

import argparse
import logging
import os
import sys
from pathlib import Path

_SCRIPT_DIR = Path(__file__).resolve().parent
if str(_SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(_SCRIPT_DIR))

from env_helpers import fail, load_env, root_env_path, set_env_var
from finreels_aws_adapters import discover_mediaconvert_endpoint
from finreels_shared import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Look up the MediaConvert API endpoint for a region.")
    parser.add_argument(
        "--region",
        default=None,
        help="AWS region (default: AWS_REGION from env or root .env, else ap-south-1)",
    )
    parser.add_argument(
        "--write",
        action="store_true",
        help="Save the endpoint as MEDIACONVERT_ENDPOINT in root .env",
    )
    args = parser.parse_args()

    configure_logging(os.environ.get("LOG_LEVEL", "INFO"))
    env_path = root_env_path()
    root_vars = load_env(env_path)
    region = args.region or os.environ.get("AWS_REGION") or root_vars.get("AWS_REGION") or "ap-south-1"

    try:
        endpoint = discover_mediaconvert_endpoint(region)
    except Exception as e:
        logging.getLogger(__name__).debug("endpoint discovery failed", exc_info=True)
        fail(f"Could not discover MediaConvert endpoint in {region}: {e}")
        return

    print(endpoint)
    if args.write:
        set_env_var(env_path, "MEDIACONVERT_ENDPOINT", endpoint)
        print(f"Set MEDIACONVERT_ENDPOINT in {env_path}.", file=sys.stderr)


if __name__ == "__main__":
    main()
