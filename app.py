import logging
import os

from track_explorer.logging_config import configure_logging
from track_explorer.ui.dash_app import create_dash_app, find_free_port

configure_logging()
logger = logging.getLogger("track_explorer.app")

app = create_dash_app(os.getenv("TRACK_EXPLORER_CONFIG", "config"))
server = app.server


def main() -> None:
    requested = int(os.getenv("PORT", "8050"))
    port = find_free_port(requested)
    if port != requested:
        logger.warning("Requested port is busy", extra={"requested": requested, "port": port})

    app.run(host="0.0.0.0", port=port, debug=os.getenv("DEBUG", "0") == "1")


if __name__ == "__main__":
    main()
