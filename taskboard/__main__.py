import uvicorn

from taskboard.config import settings


def main() -> None:
    uvicorn.run("taskboard.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    main()
