"""Command line interface for the lyric assistant."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from tabulate import tabulate

from .database import StateDatabase
from .dictionary import download_cmudict
from .index import load_rhyme_index
from .phonetics import format_key
from .rhymes import DEFAULT_LIMIT, RhymeEngine, RhymeMode
from .session import LyricSession, analyze
from .syllables import syllables_in_pronunciation

LOGGER = logging.getLogger("lyric_assistant")

STATE_ENV = "LYRIC_ASSISTANT_STATE"
CMUDICT_ENV = "LYRIC_ASSISTANT_CMUDICT"
STATE_FILENAME = "lyric_assistant.db"


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _default_state_path() -> Path:
    env_path = os.environ.get(STATE_ENV)
    if env_path:
        return Path(env_path)
    local = Path.cwd() / STATE_FILENAME
    if local.exists():
        return local
    data_home = os.environ.get("XDG_DATA_HOME")
    base = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return base / "lyric_assistant" / STATE_FILENAME


def _build_engine(args: argparse.Namespace) -> RhymeEngine:
    cmu_path = args.cmu or os.environ.get(CMUDICT_ENV)
    index = load_rhyme_index(path=cmu_path, use_nltk=args.nltk, progress=args.verbose)
    return RhymeEngine(index)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Lyric writing assistant")
    parser.add_argument("--state", help="SQLite file holding the project name and recall queue")
    parser.add_argument("--cmu", help="Path to CMU pronouncing dictionary file")
    parser.add_argument("--nltk", action="store_true", help="Load pronunciations from the NLTK cmudict corpus")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    stats_parser = subparsers.add_parser("stats", help="Word count, line syllables and target word")
    stats_parser.add_argument("file", nargs="?", help="Lyric file to analyse (stdin when omitted)")
    stats_parser.add_argument("--mode", choices=[m.value for m in RhymeMode], help="Also suggest rhymes in this mode")
    stats_parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT, help="Maximum number of suggestions")

    rhyme_parser = subparsers.add_parser("rhymes", help="Suggest rhymes for a word")
    rhyme_parser.add_argument("word", help="Word to rhyme with")
    rhyme_parser.add_argument("--mode", choices=[m.value for m in RhymeMode], default=RhymeMode.EXACT.value)
    rhyme_parser.add_argument("--all", action="store_true", help="Show every mode side by side")
    rhyme_parser.add_argument("--show-key", action="store_true", help="Print the rhyme key the word is matched on")
    rhyme_parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT, help="Maximum number of suggestions")

    queue_parser = subparsers.add_parser("queue", help="Manage the recall queue")
    queue_parser.add_argument("action", choices=["push", "append", "pop", "show", "clear"])
    queue_parser.add_argument("line", nargs="?", default="", help="Line to push or append")

    project_parser = subparsers.add_parser("project", help="Show or set the project name")
    project_parser.add_argument("name", nargs="?", help="New project name")

    fetch_parser = subparsers.add_parser("fetch-cmudict", help="Download the CMU pronouncing dictionary")
    fetch_parser.add_argument("destination", help="Where to store cmudict-0.7b")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "fetch-cmudict":
        path = download_cmudict(Path(args.destination))
        LOGGER.info("Dictionary saved to %s", path)
        return

    if args.command == "stats":
        if args.file:
            source = Path(args.file)
            if not source.exists():
                parser.error(f"File {source} does not exist.")
            try:
                text = source.read_text(encoding="utf8")
            except UnicodeDecodeError as exc:
                parser.error(f"File {source} is not UTF-8 text: {exc.reason}")
        else:
            text = sys.stdin.read()
        analysis = analyze(text)
        engine = _build_engine(args)
        rows = [
            ["Words", analysis.word_count],
            ["Syllables (line)", analysis.syllable_count],
            ["Target word", analysis.target_word or "(start typing…)"],
        ]
        dictionary_count = _dictionary_syllables(engine, analysis.target_word)
        if dictionary_count is not None:
            rows.append(["Syllables (target, dictionary)", dictionary_count])
        print(tabulate(rows))
        if args.mode:
            _print_suggestions(engine.suggest(analysis.target_word, args.mode, args.limit))
        return

    if args.command == "rhymes":
        engine = _build_engine(args)
        if args.show_key:
            key = engine.index.key_for(args.word) if engine.index is not None else None
            print(f"Rhyme key: {format_key(key) or '(none)'}")
        if args.all:
            results = engine.suggest_all(args.word, args.limit)
            rows = [[mode.value, " · ".join(words) or "(no matches)"] for mode, words in results.items()]
            print(tabulate(rows, headers=["Mode", "Suggestions"]))
        else:
            _print_suggestions(engine.suggest(args.word, args.mode, args.limit))
        return

    state_path = Path(args.state) if args.state else _default_state_path()
    with StateDatabase(state_path) as store:
        session = LyricSession(store)
        if args.command == "project":
            if args.name is not None:
                session.project_name = args.name
            print(session.project_name or "(untitled)")
        elif args.command == "queue":
            _run_queue_action(parser, session, args.action, args.line)


def _run_queue_action(parser: argparse.ArgumentParser, session: LyricSession, action: str, line: str) -> None:
    if action in ("push", "append") and not line.strip():
        parser.error(f"queue {action} needs a non-blank line")
    if action == "push":
        session.save_active(line)
        print("Saved to top of list")
    elif action == "append":
        session.queue.push_bottom(line)
        session.persist()
        print("Saved to bottom of list")
    elif action == "pop":
        recalled = session.recall_next()
        print(recalled if recalled is not None else "List is empty")
    elif action == "clear":
        session.queue.clear()
        session.persist()
        print("List cleared")
    else:
        entries = session.queue.entries()
        if not entries:
            print("(empty)")
            return
        print(tabulate([[position, entry] for position, entry in enumerate(entries, start=1)], headers=["#", "Line"]))


def _dictionary_syllables(engine: RhymeEngine, word: str) -> Optional[int]:
    if not word or engine.index is None:
        return None
    pronunciation = engine.index.dictionary.preferred(word)
    if pronunciation is None:
        return None
    return syllables_in_pronunciation(pronunciation)


def _print_suggestions(suggestions: list[str]) -> None:
    if not suggestions:
        print("No matches found")
        return
    for suggestion in suggestions:
        print(f"  {suggestion}")


if __name__ == "__main__":  # pragma: no cover
    main()
