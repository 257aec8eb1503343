"""Run the API with uvicorn: `python -m todo_api`."""

import logging

import uvicorn

from .core.config import load_settings
from .main import create_app


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )
    logging.getLogger('todo_api').info(f'Server is running at port {settings.PORT}')
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == '__main__':
    main()
