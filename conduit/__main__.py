# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import argparse

from conduit.app import create_app
from conduit.shared.config import load_config


def main(argv: list[str] | None = None) -> None:
    config = load_config()
    parser = argparse.ArgumentParser(description="Run the Conduit API server")
    parser.add_argument("--host", type=str, default=config.server.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=config.server.port, help="Port to listen on")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=config.debug_logging,
        help="Enable verbose request logging",
    )
    args = parser.parse_args(argv)

    config = config.model_copy(update={"debug_logging": args.debug})
    app = create_app(config)
    app.run(host=args.host, port=args.port, debug=False, threaded=True)


if __name__ == "__main__":
    main()
