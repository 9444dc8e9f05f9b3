"""Interactive picker — choose one presentation from the terminal.

A small line-based loop over a candidate source:

    Search for a presentation: intro
      1) talks/intro-to-rust.html
      2) examples/intro.html
    Select [1-2], refine, or Enter for 1:

Typing a number selects that match, any other text becomes the new query,
and an empty line takes the first match.

Input is read on the calling thread so that Ctrl-C interrupts the prompt
immediately.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from decklet._errors import SelectionCancelled

if TYPE_CHECKING:
    from collections.abc import Callable

    from decklet._types import ContentPath, SearchSource

MAX_LISTED = 20


def prompt_for_presentation(
    source: SearchSource,
    *,
    input_func: Callable[[str], str] | None = None,
    output: TextIO | None = None,
) -> ContentPath:
    """Ask the user for a presentation and return the chosen ContentPath.

    Args:
        source: Function mapping a query to candidate paths.
        input_func: Blocking line reader (default: builtin ``input``).
        output: Stream for the candidate listing (default: stderr).

    Raises:
        SelectionCancelled: On end of input or Ctrl-C.

    """
    read_line = input_func if input_func is not None else input
    out = output if output is not None else sys.stderr

    query = _read(read_line, "Search for a presentation: ")
    while True:
        matches = source(query)
        if not matches:
            print(f"  No presentations match {query!r}.", file=out)
            query = _read(read_line, "Search for a presentation: ")
            continue

        listed = matches[:MAX_LISTED]
        for number, path in enumerate(listed, start=1):
            print(f"  {number}) {path}", file=out)
        if len(matches) > len(listed):
            print(f"  ... {len(matches) - len(listed)} more, refine the search", file=out)

        answer = _read(read_line, f"Select [1-{len(listed)}], refine, or Enter for 1: ")
        if not answer:
            return listed[0]
        if answer.isdigit():
            index = int(answer)
            if 1 <= index <= len(listed):
                return listed[index - 1]
            print(f"  No match numbered {index}.", file=out)
            continue
        query = answer


def _read(input_func: Callable[[str], str], prompt: str) -> str:
    try:
        line = input_func(prompt)
    except (EOFError, KeyboardInterrupt) as exc:
        msg = "No presentation selected"
        raise SelectionCancelled(msg) from exc
    return line.strip()
