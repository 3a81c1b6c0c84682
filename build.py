import subprocess
import sys
import os

from bookshelf.config import APP_VERSION

APP_NAME = "Bookshelf"


def pyinstaller_args(ci: bool = False) -> list[str]:
    args = [
        "pyinstaller",
        "main.py",
        "--name",
        f"{APP_NAME}-{APP_VERSION}",
        "--clean",
        "--onefile",
        # bookshelf is a namespace package; list its modules explicitly
        "--collect-submodules",
        "bookshelf",
        "--collect-all",
        "flet_desktop",
        "--collect-data",
        "flet",
    ]
    # Keep the console in CI so build logs stay visible
    if not ci:
        args.append("--noconsole")
    return args


def build():
    args = pyinstaller_args(ci=bool(os.environ.get("CI")))

    print(f"Running: {' '.join(args)}")
    result = subprocess.run(args)

    if result.returncode == 0:
        print(f"\n{APP_NAME} built. The executable is in the 'dist' folder.")
    else:
        print(f"\n{APP_NAME} build failed.")
        sys.exit(result.returncode)


if __name__ == "__main__":
    build()
