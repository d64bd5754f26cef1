"""Run the inventory service with uvicorn: ``python -m inventory_service``."""
import uvicorn

from .config import PORT, configure_logging


def main() -> None:
    configure_logging()
    uvicorn.run("inventory_service.main:app", host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    main()
