# plugins/text/entrypoint.py
from __future__ import annotations

from easyconsole.commands import BlockingOutput, LogLevel, OutputHandler, command

MODULE = "Text"


# ---------- echo ----------
@command(
    name="echo",
    description="Print the arguments back. Usage: echo <text...>",
    module=MODULE,
)
async def echo(args: list[str], output: OutputHandler) -> None:
    await output.write(" ".join(args), LogLevel.INFO)


# ---------- upper ----------
@command(
    name="upper",
    description="Print the arguments in upper case. Usage: upper <text...>",
    module=MODULE,
)
def upper(args: list[str], output: OutputHandler) -> str:
    if not args:
        raise ValueError("upper needs at least one argument")
    return " ".join(args).upper()


# ---------- count ----------
@command(
    name="count",
    description="Count arguments and characters. Usage: count <text...>",
    module=MODULE,
)
def count(args: list[str], output: BlockingOutput) -> None:
    characters = sum(len(a) for a in args)
    output.write(f"{len(args)} argument(s), {characters} character(s)", LogLevel.INFO)
