"""Run the service: ``python -m blog``."""
import uvicorn

from .config import HOST, PORT, LOG_LEVEL
from .logging_setup import configure_logging


def main() -> None:
    configure_logging()
    uvicorn.run("blog.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower(), log_config=None)


if __name__ == "__main__":
    main()
