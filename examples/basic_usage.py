"""Minimal example showing how a launcher would consume parsed subcommands."""

from __future__ import annotations

import logging
from pprint import pprint

from pipeparse import RedirectMode, parse_commandline


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s] %(name)s: %(message)s")

    result = parse_commandline("sort -r < words.txt | uniq -c >> counts.txt | | wc <")
    print(f"{result.commandline.num} subcommands, {len(result.errors)} errors")

    for seg in result.segments:
        sub = seg.subcommand
        pprint(
            {
                "index": seg.index,
                "exec_args": sub.exec_args,
                "stdin": sub.input,
                "stdout": sub.output,
                "append": sub.mode is RedirectMode.APPEND,
            }
        )

    for err in result.errors:
        print(f"syntax error: {err.error}")


if __name__ == "__main__":
    main()
