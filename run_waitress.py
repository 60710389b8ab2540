# run_waitress.py

import logging

from waitress import serve
from storefront.main import my_app

logger = logging.getLogger(__name__)


def main():
    settings = my_app.config["SETTINGS"]
    logger.info(f"Starting Waitress server on http://{settings.host}:{settings.port} ...")
    serve(my_app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
