import uvicorn

from go_outing.core.config import settings


def run() -> None:
    uvicorn.run("go_outing.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
