"""Interactive terminal drill over the vocabulary content.

Usage:
    python -m vocabdrill.cli.drill --stage 2 --dir en-to-es

Commands (one per line):
    r       reveal the next part of the card (example, then translation)
    n / p   next / previous card
    d       flip the language direction
    f       flag or unflag the current card as a favorite
    v       open the favorites view
    g N     go to stage N
    s       pronounce the current word
    l       list stages
    h       show this help
    q       quit

Errors (unknown stage, bad card id, ...) are printed and the drill goes on.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from vocabdrill.constants import (
    CONTENT_DIR,
    DEFAULT_DIRECTION,
    LEARNING_LANGUAGE,
    LOG_FILE,
    LOG_FORMAT,
    LOG_LEVEL,
    NATIVE_LANGUAGE,
    STAGE_WIDTH,
)
from vocabdrill.errors import VocabDrillError
from vocabdrill.models.session import CardView, NavigationMode
from vocabdrill.session import LearningSession
from vocabdrill.utils.language_utils import get_flag_emoji, get_language_name, get_native_name
from vocabdrill.utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  r      reveal example / translation
  n, p   next / previous card
  d      flip direction
  f      toggle favorite
  v      favorites view
  g N    go to stage N
  s      speak the word
  l      list stages
  h      help
  q      quit"""


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Drill vocabulary cards with progressive reveal"
    )

    parser.add_argument(
        "--content-dir",
        default=str(CONTENT_DIR),
        help="Directory with <stage>/<language>.json content (default: bundled content)"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--stage",
        type=int,
        default=1,
        help="Stage to start in (default: 1)"
    )
    group.add_argument(
        "--favorites",
        action="store_true",
        help="Start in the favorites view"
    )
    parser.add_argument(
        "--card",
        type=int,
        help="Global card id to open within --stage"
    )
    parser.add_argument(
        "--dir",
        dest="direction",
        default=DEFAULT_DIRECTION,
        help="Direction token, e.g. 'es-to-en' or 'en-to-es'"
    )
    parser.add_argument(
        "--learning-language",
        default=LEARNING_LANGUAGE,
        help="Language being learned (name or ISO 639-1 code)"
    )
    parser.add_argument(
        "--native-language",
        default=NATIVE_LANGUAGE,
        help="Language of the translations (name or ISO 639-1 code)"
    )
    parser.add_argument(
        "--stage-width",
        type=int,
        default=STAGE_WIDTH,
        help="Cards per stage (default: %(default)s)"
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level (default: %(default)s)"
    )

    args = parser.parse_args(argv)
    if args.favorites and args.card is not None:
        parser.error("--card opens a card within --stage and cannot be combined with --favorites")
    return args


def log_speaker(text: str, locale: str) -> None:
    """Default speaker: no synthesizer in a terminal, so record the request."""
    logger.info(f"speak [{locale}] {text}")


def render_card(view: CardView, learning_language: str, native_language: str) -> str:
    """Format the current card for the terminal."""
    source_language = view.direction.source_language(learning_language, native_language)
    target_language = view.direction.target_language(learning_language, native_language)
    star = "*" if view.is_favorite else " "

    if view.mode is NavigationMode.FAVORITES:
        header = f"Favorites  {view.progress_label}"
    else:
        header = f"Stage {view.stage}  {view.progress_label}"

    lines = [
        f"[{star}] {header}",
        f"{get_flag_emoji(source_language)} {view.source_word}",
    ]
    if view.source_example is not None:
        lines.append(f"    {view.source_example}")
    if view.target_word is not None:
        lines.append(f"{get_flag_emoji(target_language)} {view.target_word}")
        lines.append(f"    {view.target_example}")
    else:
        lines.append(f"    ({get_language_name(target_language)} hidden)")
    return "\n".join(lines)


class DrillShell:
    """Reads commands, drives the session navigator, prints the card."""

    def __init__(
        self,
        session: LearningSession,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Callable[[str], None] = print,
    ):
        self.session = session
        self.navigator = session.navigator
        self.input_fn = input_fn or input
        self.output_fn = output_fn

    def show(self) -> None:
        try:
            view = self.navigator.view()
        except VocabDrillError as e:
            if self.navigator.mode is NavigationMode.FAVORITES:
                self.output_fn("No favorites yet! Flag cards with 'f' while drilling a stage.")
            else:
                self.output_fn(f"Error loading card: {e}")
            return
        self.output_fn(render_card(view, *self.session.content.languages))

    def handle(self, line: str) -> bool:
        """Run one command line.

        Returns:
            False when the learner asked to quit
        """
        parts = line.strip().split()
        if not parts:
            return True
        command, args = parts[0].lower(), parts[1:]

        if command == "q":
            return False
        if command == "h":
            self.output_fn(HELP_TEXT)
            return True
        if command == "l":
            stages = ", ".join(str(stage) for stage in self.session.content.stages())
            self.output_fn(f"Stages: {stages}")
            return True

        try:
            if command == "r":
                self.navigator.advance_reveal()
            elif command == "n":
                self.navigator.next()
            elif command == "p":
                self.navigator.previous()
            elif command == "d":
                self.navigator.toggle_direction()
                self.output_fn(f"Direction: {self.navigator.direction_token}")
            elif command == "f":
                self.navigator.toggle_current_favorite()
            elif command == "v":
                self.navigator.enter_favorites()
            elif command == "s":
                self.navigator.speak_current()
            elif command == "g":
                if len(args) != 1 or not args[0].isdigit():
                    self.output_fn("Usage: g <stage>")
                    return True
                self.navigator.enter_stage(int(args[0]))
            else:
                self.output_fn(f"Unknown command '{command}' (h for help)")
                return True
        except VocabDrillError as e:
            self.output_fn(f"Error: {e}")
            return True

        self.show()
        return True

    def run(self) -> None:
        self.show()
        while True:
            try:
                line = self.input_fn("> ")
            except EOFError:
                break
            if not self.handle(line):
                break


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the drill CLI."""
    args = parse_args(argv)

    configure_logging(
        level=args.log_level,
        log_file=LOG_FILE,
        json_format=LOG_FORMAT == "json",
    )

    try:
        session = LearningSession.from_directory(
            args.content_dir,
            stage_width=args.stage_width,
            learning_language=args.learning_language,
            native_language=args.native_language,
            speak=log_speaker,
            direction_token=args.direction,
        )
    except (VocabDrillError, ValueError) as e:
        logger.error(f"Failed to load content: {e}")
        return 1

    shell = DrillShell(session)
    learning_language, native_language = session.content.languages
    shell.output_fn(
        f"{get_native_name(learning_language)} / {get_native_name(native_language)} "
        f"({session.navigator.direction_token}), h for help"
    )

    try:
        if args.favorites:
            session.navigator.enter_favorites()
        elif args.card is not None:
            session.navigator.jump_to_card(args.stage, args.card)
        else:
            session.navigator.enter_stage(args.stage)
    except VocabDrillError as e:
        shell.output_fn(f"Card not found: {e}")

    shell.run()
    session.end()
    return 0


if __name__ == "__main__":
    sys.exit(main())
