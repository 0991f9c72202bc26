# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from fleetshare.app import create_app
from fleetshare.shared.config import load_config
from fleetshare.shared.logging import logger


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"Server is running on port {config.port}")
    app.run(host=config.host, port=config.port, debug=False, threaded=True)


if __name__ == "__main__":
    main()
