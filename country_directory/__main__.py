"""Lancer le service / Run the service: ``python -m country_directory``."""

import uvicorn

from country_directory.config import settings


def main() -> None:
    uvicorn.run(
        "country_directory.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
