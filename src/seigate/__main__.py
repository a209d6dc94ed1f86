import logging

import uvicorn

from seigate.config import settings


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-5s %(name)s - %(message)s",
    )
    for name in ("httpx", "httpcore", "web3", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)

    uvicorn.run("seigate.api.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    main()
