"""The parsed form of one input line."""

from dataclasses import dataclass, field


@dataclass
class Command:
    """Arguments plus optional redirections for a single command.

    ``input`` and ``output`` are file paths; ``None`` means the shell's own
    stdin/stdout.
    """

    input: str | None = None
    output: str | None = None
    arguments: list[str] = field(default_factory=list)

    def set_input(self, path: str | None) -> bool:
        """Set the input file, or clear it with ``None``.

        Returns False if a file was already set. In that case the old value
        is dropped and the new one is NOT applied, leaving the slot empty.
        """
        if self.input is not None:
            self.input = None
            return False
        self.input = path
        return True

    def set_output(self, path: str | None) -> bool:
        """Set the output file, or clear it with ``None``. See set_input."""
        if self.output is not None:
            self.output = None
            return False
        self.output = path
        return True

    def append_arg(self, arg: str) -> None:
        self.arguments.append(arg)

    @property
    def argc(self) -> int:
        return len(self.arguments)

    @property
    def argv(self) -> tuple[str, ...]:
        return tuple(self.arguments)

    def is_empty(self) -> bool:
        """True when there are no arguments and no redirections."""
        return self.input is None and self.output is None and not self.arguments

    def dump(self) -> str:
        lines = [
            f"  < {self.input if self.input is not None else 'stdin'}",
            f"  > {self.output if self.output is not None else 'stdout'}",
            f"  argc={self.argc}",
        ]
        lines.extend(f"    argv[{i}] = {arg}" for i, arg in enumerate(self.arguments))
        return "\n".join(lines)
