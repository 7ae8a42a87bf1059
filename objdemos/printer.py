"""A printer shared by the whole program, counting what it has printed."""

from __future__ import annotations


class Printer:
    """Single shared printer; obtain it with ``Printer.instance()``."""

    _instance: Printer | None = None
    _key = object()

    def __init__(self, _key: object = None) -> None:
        if _key is not Printer._key:
            raise TypeError("Printer is shared; use Printer.instance()")
        self.times = 0

    def __copy__(self) -> Printer:
        # Copying the shared printer yields the shared printer itself.
        return self

    def __deepcopy__(self, memo: dict) -> Printer:
        memo[id(self)] = self
        return self

    @classmethod
    def instance(cls) -> Printer:
        return cls._instance

    def print_text(self, text: str) -> None:
        """Print the text with the number of earlier print jobs."""
        print(f"打印内容:{text}")
        print(f"已打印次数:{self.times}")
        print("--------------")
        self.times += 1


Printer._instance = Printer(Printer._key)


def main(argv: list[str] | None = None) -> int:
    """Print three documents on the shared printer."""
    printer = Printer.instance()
    for text in ("离职报告!", "入职合同!", "提交代码!"):
        printer.print_text(text)
    return 0