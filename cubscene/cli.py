"""Command line entry point: parse a ``.cub`` scene and print what it holds."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from cubscene.config import ConfigError, GameData, SceneLoader
from cubscene.reader import LineReader
from cubscene.strutil import strrstr

USAGE = "Usage: cubscene path_to_map.cub"
EXTENSION = ".cub"


def check_extension(filename: str) -> None:
    """Raise :class:`ConfigError` unless ``filename`` ends in ``.cub``."""
    index = strrstr(filename, EXTENSION)
    if index is None or len(filename) - index != len(EXTENSION):
        raise ConfigError(USAGE)


def parse_file(path: str) -> GameData:
    """Read and parse the scene file at ``path``."""
    check_extension(path)
    try:
        stream = open(path, encoding="utf-8", errors="surrogateescape", newline="")
    except OSError as exc:
        raise ConfigError("Failed to open the file") from exc
    loader = SceneLoader()
    with stream:
        for line in LineReader(stream):
            loader.load_line(line)
    return loader.finish()


def _show(value: str | None) -> str:
    return "(null)" if value is None else value


def format_game_data(data: GameData) -> str:
    """Render the parsed scene as the report printed by :func:`main`."""
    lines = [
        f"no_path:    {_show(data.no_path)}",
        f"so_path:    {_show(data.so_path)}",
        f"we_path:    {_show(data.we_path)}",
        f"ea_path:    {_show(data.ea_path)}",
        f"f_rgb:      {data.f_rgb}",
        f"c_rgb:      {data.c_rgb}",
    ]
    if data.map is None:
        lines.append("map:        (null)")
    else:
        lines.append("map:")
        lines.extend(f"  {row}" for row in data.map)
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the scene named on the command line and print it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"Error\n{USAGE}")
        return 1
    try:
        data = parse_file(args[0])
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1
    sys.stdout.write(format_game_data(data))
    return 0


if __name__ == "__main__":
    sys.exit(main())