# main.py

from subprocess import run
from sys import executable

from bloglist.configs import settings


def start(cmmd: list[str]) -> None:
    run(cmmd, check=True)


def main() -> None:
    cmmd = [
        executable,
        "-m",
        "uvicorn",
        "bloglist.main:app",
        "--host",
        "127.0.0.1",
        "--port",
        "8000",
        "--log-level",
        settings.LOG_LEVEL.lower(),
    ]
    if settings.ENVIRONMENT == "development":
        cmmd.append("--reload")
    start(cmmd)


if __name__ == "__main__":
    main()
