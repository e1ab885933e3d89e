import typing

import rich, rich.console


class RegParmPrinter:
    def __init__(self):
        self.stack = []
        self.raw   = rich.console.Console()
        self.err   = rich.console.Console(stderr=True)

    def reset(self):
        self.stack = []

    def indent(self, msg: str = None):
        msg = msg if msg is not None else "  "

        self.stack.append(msg)

    def unindent(self, times: int = None):
        if times is None:
            times = 1

        for _ in range(times):
            self.stack.pop()

    def _indented(self, msg: typing.Any) -> str:
        lines = str(msg).split('\n')

        return '\n'.join(f"{''.join(self.stack)}{s}" for s in lines)

    def print(self, msg: typing.Any = None, *args, no_indent: bool = False, **kwargs):
        if msg is None:
            msg = ""

        if not isinstance(msg, str):
            # Renderables (tables, panels, ...) are passed through untouched.
            self.raw.print(msg, *args, **kwargs)
            return

        self.raw.print(str(msg) if no_indent else self._indented(msg), *args, soft_wrap=True, **kwargs)

    def print_err(self, msg: typing.Any = None, **kwargs):
        self.err.print(self._indented("" if msg is None else msg), soft_wrap=True, **kwargs)


cons = RegParmPrinter()
