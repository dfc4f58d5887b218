"""Run the hand scoring API."""

import os

from scoring_api.app import create_app, setup_logging
from scoring_api.config import get_config


if __name__ == "__main__":
    setup_logging()

    config_class = get_config()
    app = create_app(config_class)

    port = int(os.environ.get("PORT", "5000"))
    print(f"Starting hand scoring API at http://localhost:{port}/api/score")

    app.run(host="0.0.0.0", port=port, debug=config_class.DEBUG, use_reloader=False)
