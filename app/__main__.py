# app/__main__.py

import uvicorn

from app.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run("app:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
