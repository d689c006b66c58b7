"""
cli.py

Responsibility: console entrypoint for GameForge.

Builds one game per selected builder variant through a single director and
prints each configuration block. With no arguments it builds the AAA game and
then the indie game.
"""

from __future__ import annotations

import argparse
import sys
from typing import List

from .builder import create_builder, known_variants
from .config import Settings, load_settings
from .director import GameDirector
from .schemas import LABELS, labels_for


def _trace_to_stderr(message: str) -> None:
    print(f"[GameForge] {message}", file=sys.stderr)


def run(settings: Settings) -> int:
    labels = labels_for(settings.locale)
    director = GameDirector(trace=_trace_to_stderr if settings.verbose else None)

    for index, name in enumerate(settings.variants, start=1):
        builder = create_builder(name)
        director.set_builder(builder)
        game = director.construct_game()

        print(labels.caption.format(index=index, title=builder.title))
        print(game.render(labels))
        if settings.verbose:
            _trace_to_stderr(f"built {name}: complete={game.is_complete()}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="gameforge", description="GameForge - build game configurations with the builder pattern")
    p.add_argument(
        "--variant",
        dest="variants",
        action="append",
        choices=known_variants(),
        default=None,
        help="Builder variant to run; repeat to run several (default: GAMEFORGE_VARIANTS or aaa, indie)",
    )
    p.add_argument("--locale", choices=sorted(LABELS), default=None, help="Output labels (default: GAMEFORGE_LOCALE or en)")
    p.add_argument("--verbose", action="store_true", default=None, help="Print construction steps to stderr")
    return p


def main(argv: List[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = load_settings()
    settings = Settings(
        variants=args.variants or settings.variants,
        locale=args.locale or settings.locale,
        verbose=settings.verbose if args.verbose is None else bool(args.verbose),
    )
    # 西里尔字母标签需要 UTF-8 输出
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    encoding = (getattr(sys.stdout, "encoding", None) or "").lower().replace("-", "")
    if settings.locale != "en" and encoding != "utf8" and reconfigure is not None:
        reconfigure(encoding="utf-8")
    return run(settings)


if __name__ == "__main__":
    raise SystemExit(main())
