"""Run the comment server with the built-in WSGI server.

SIGINT/SIGTERM drain the comment store before the process exits.
"""

from commentbox import create_app
from commentbox.db import get_drain_handle, get_store_for
from commentbox.shutdown import install_shutdown_handler

app = create_app()


if __name__ == "__main__":
    # Imported after create_app so the config class sees .env values.
    from commentbox.config import parse_listen_address

    host, port = parse_listen_address(str(app.config["LISTEN_ADDRESS"]))
    install_shutdown_handler(get_drain_handle(app), get_store_for(app))
    app.run(host=host, port=port, debug=False, threaded=True)
