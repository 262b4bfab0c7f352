"""Run the account API with uvicorn.

Usage:
    python -m backend.serve
"""
import logging

import uvicorn

from backend.core import config


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    uvicorn.run('backend.main:app', host=config.HOST, port=config.PORT)


if __name__ == '__main__':
    main()
