import argparse
import json
import sys
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from ..analyzers.base import EMOTIONS
from ..analyzers.lexicon import LexiconStore
from ..config import load_config
from ..opinion import Opinion

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="opinionminer",
        description="Opinion Miner - lexicon-based sentiment and emotion scoring for English text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "-c", "--config", type=Path, default=None, help="YAML configuration file"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    _add_analyze_subparser(subparsers)
    _add_emotions_subparser(subparsers)
    _add_word_subparser(subparsers)

    return parser


def _add_input_arguments(subparser):
    source = subparser.add_mutually_exclusive_group(required=True)
    source.add_argument("-i", "--input", type=Path, help="Text file to analyze")
    source.add_argument("-t", "--text", type=str, help="Text string to analyze")
    subparser.add_argument(
        "--stem", action="store_true", default=None, help="Stem words with WordNet"
    )
    subparser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )


def _add_analyze_subparser(subparsers):
    """Add the analyze subcommand."""
    analyze_parser = subparsers.add_parser(
        "analyze", help="Score positive/negative polarity per sentence"
    )
    _add_input_arguments(analyze_parser)
    analyze_parser.add_argument(
        "--bins",
        type=int,
        default=None,
        help="Sentences per averaged point (default: 10)",
    )


def _add_emotions_subparser(subparsers):
    """Add the emotions subcommand."""
    emotions_parser = subparsers.add_parser(
        "emotions", help="Score the ten NRC emotions per sentence"
    )
    _add_input_arguments(emotions_parser)


def _add_word_subparser(subparsers):
    """Add the word subcommand."""
    word_parser = subparsers.add_parser(
        "word", help="Look up a single word in both lexicons"
    )
    word_parser.add_argument("word", help="Word to look up")
    word_parser.add_argument(
        "--stem", action="store_true", default=None, help="Stem the word with WordNet"
    )
    word_parser.add_argument(
        "--json", action="store_true", help="Print results as JSON"
    )


def _build_opinion(args, config) -> Opinion:
    analysis = config.get("analysis", {})
    stem = args.stem if args.stem is not None else analysis.get("stem", False)
    return Opinion(
        file=getattr(args, "input", None),
        text=getattr(args, "text", None),
        stem=stem,
        lexicon=LexiconStore.from_config(config),
    )


def _familiarity_line(opinion: Opinion) -> str:
    fam = opinion.familiarity
    if fam.total == 0:
        return f"known={fam.known} unknown={fam.unknown}"
    return f"known={fam.known} unknown={fam.unknown} ratio={opinion.ratio():.3f}"


def cmd_analyze(args, config) -> int:
    """Execute the analyze command."""
    try:
        opinion = _build_opinion(args, config)
    except FileNotFoundError as e:
        print(e)
        return 1
    opinion.analyze()
    bins = args.bins if args.bins is not None else config.get("analysis", {}).get("bins", 10)
    averaged = opinion.averaged_scores(bins)

    if args.json:
        result = opinion.summary()
        result.pop("nrc_scores")
        result["averaged_scores"] = averaged
        print(json.dumps(result, ensure_ascii=False, indent=2))
        return 0

    console = Console()
    table = Table(title="Sentence polarity")
    table.add_column("#", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Sentence")
    for i, (score, sentence) in enumerate(zip(opinion.scores, opinion.sentences), start=1):
        table.add_row(str(i), str(score), sentence)
    console.print(table)
    console.print(f"Averaged ({bins} per bin): {[round(a, 3) for a in averaged]}")
    console.print(f"Familiarity: {_familiarity_line(opinion)}")
    return 0


def cmd_emotions(args, config) -> int:
    """Execute the emotions command."""
    try:
        opinion = _build_opinion(args, config)
    except FileNotFoundError as e:
        print(e)
        return 1
    opinion.nrc_analyze()

    if args.json:
        result = opinion.summary()
        result.pop("scores")
        print(json.dumps(result, ensure_ascii=False, indent=2))
        return 0

    console = Console()
    table = Table(title="Sentence emotions")
    table.add_column("#", justify="right")
    for emotion in EMOTIONS:
        table.add_column(emotion, justify="right")
    for i, vector in enumerate(opinion.nrc_scores, start=1):
        table.add_row(str(i), *(str(vector[e]) for e in EMOTIONS))
    console.print(table)
    console.print(f"Familiarity: {_familiarity_line(opinion)}")
    return 0


def cmd_word(args, config) -> int:
    """Execute the word command."""
    analysis = config.get("analysis", {})
    stem = args.stem if args.stem is not None else analysis.get("stem", False)
    opinion = Opinion(stem=stem, lexicon=LexiconStore.from_config(config))
    word = args.word.lower()
    result = {
        "word": word,
        "polarity": opinion.get_word_polarity(word),
        "emotions": opinion.nrc_get_word(word),
    }

    if args.json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
        return 0

    console = Console()
    if result["polarity"] is None and result["emotions"] is None:
        console.print(f"{word!r} is not in either lexicon")
        return 0
    score = opinion.get_word(word)
    console.print(f"Polarity: {score if score is not None else 'unknown'}")
    if result["emotions"] is not None:
        tags = [e for e in EMOTIONS if result["emotions"][e]]
        console.print(f"Emotions: {', '.join(tags) if tags else 'none'}")
    else:
        console.print("Emotions: unknown")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    level = config.get("logging", {}).get("level", "INFO")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, str(level).upper(), logging.INFO),
        format="%(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "analyze": cmd_analyze,
        "emotions": cmd_emotions,
        "word": cmd_word,
    }

    return commands[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
