import sys
from typing import Any, TextIO


def printf(format: str, *args: Any, file: TextIO | None = None):
    print(format.format(*args), end="", file=file)


def printf_err(format: str, *args: Any):
    printf(format, *args, file=sys.stderr)
