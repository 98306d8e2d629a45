"""Command-line interface for the Janet Card Generator."""

import argparse
import logging
import random
import re
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from janet_card_generator import __version__
from janet_card_generator.config import settings
from janet_card_generator.core import CardGenerator
from janet_card_generator.exceptions import CardGeneratorError
from janet_card_generator.templates import TemplateRegistry, build_registry

logger = logging.getLogger(__name__)

console = Console(highlight=False, soft_wrap=True)

PROG = "janet-cards"

COMMAND_ALIASES = {
    "generate": "generate",
    "gen": "generate",
    "random": "random",
    "rand": "random",
    "batch": "batch",
    "templates": "templates",
    "list": "templates",
    "custom": "custom",
}

# Positional override order for `generate`
OVERRIDE_FIELDS = ("cost", "attack-strength", "defense")

DEFAULT_RANDOM_COUNT = 1
DEFAULT_BATCH_COUNT = 5

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class GenerateParams:
    """Typed arguments of the generate command."""

    name: str
    template: str
    overrides: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class CountParams:
    """Typed arguments of the random and batch commands."""

    count: int


def coerce_int(text: str) -> int:
    """Parse the leading integer of ``text``, or 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_generate_args(tokens: list[str]) -> Optional[GenerateParams]:
    """Build generate parameters, or None if name or template is missing."""
    if len(tokens) < 2:
        return None
    overrides = {
        key: coerce_int(value) for key, value in zip(OVERRIDE_FIELDS, tokens[2:])
    }
    return GenerateParams(name=tokens[0], template=tokens[1], overrides=overrides)


def parse_count_args(tokens: list[str], default: int) -> CountParams:
    return CountParams(count=coerce_int(tokens[0]) if tokens else default)


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Generate Janet card definitions from templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=usage_text(),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help=f"Directory for generated cards (default: {settings.output_dir})",
    )
    parser.add_argument(
        "--templates-file",
        type=Path,
        help="YAML file with extra templates",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for random card generation",
    )
    parser.add_argument("command", nargs="?", help="Command to run")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Command arguments")
    return parser


def usage_text() -> str:
    return "\n".join(
        [
            "Usage:",
            f"  {PROG} generate <name> <template> [cost] [attack] [defense]",
            f"  {PROG} random [count]                    # Generate random cards",
            f"  {PROG} batch [count]                     # Generate batch of cards",
            f"  {PROG} custom                            # Interactive card creation",
            f"  {PROG} templates                         # List available templates",
            "",
            "Examples:",
            f"  {PROG} generate 'Fire Warrior' heavy_unit 4 3 2",
            f"  {PROG} random 3",
            f"  {PROG} batch 10",
        ]
    )


def list_templates(registry: TemplateRegistry) -> None:
    console.print("Available templates:")
    for name in registry.names():
        console.print(f"  - {name}", markup=False)


def print_help(registry: TemplateRegistry) -> None:
    console.print("Card Generator for Janet-based Game")
    console.print()
    console.print(usage_text(), markup=False)
    console.print()
    list_templates(registry)


def report(path: Path) -> None:
    console.print(f"Generated: {path}", markup=False)


def run_generate(generator: CardGenerator, tokens: list[str]) -> int:
    params = parse_generate_args(tokens)
    if params is None:
        console.print(
            f"Usage: {PROG} generate <name> <template> [cost] [attack] [defense]",
            markup=False,
        )
        console.print(f"Example: {PROG} generate 'Fire Mage' ranged_unit 3 2 1")
        list_templates(generator.registry)
        return 1

    report(generator.generate_card(params.name, params.template, params.overrides))
    return 0


def run_random(generator: CardGenerator, tokens: list[str]) -> int:
    params = parse_count_args(tokens, DEFAULT_RANDOM_COUNT)
    for _ in range(params.count):
        report(generator.generate_random_card())
    return 0


def run_batch(generator: CardGenerator, tokens: list[str]) -> int:
    params = parse_count_args(tokens, DEFAULT_BATCH_COUNT)
    console.print(f"Generating {params.count} random cards...")
    for path in generator.generate_batch(params.count):
        report(path)
    return 0


def run_custom(
    generator: CardGenerator,
    prompt: Optional[Callable[[str], str]] = None,
) -> int:
    """Interactively ask for a card's name, template and stats.

    Blank stat answers keep the template's value.
    """
    prompt = prompt or console.input

    console.print("=== Custom Card Generator ===")
    name = prompt("Card name: ")

    console.print()
    list_templates(generator.registry)
    console.print()
    template = prompt("Choose template: ")

    answers = [
        prompt("Cost (default from template): "),
        prompt("Attack strength (default from template): "),
        prompt("Defense (default from template): "),
    ]
    overrides = {
        key: coerce_int(answer)
        for key, answer in zip(OVERRIDE_FIELDS, answers)
        if answer.strip()
    }

    report(generator.generate_card(name, template, overrides))
    return 0


COMMANDS = {
    "generate": run_generate,
    "random": run_random,
    "batch": run_batch,
    "custom": lambda generator, tokens: run_custom(generator),
}


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args, unknown = parser.parse_known_args(argv)

    setup_logging(args.verbose or settings.debug)

    try:
        registry = build_registry(args.templates_file or settings.templates_file)
        command = COMMAND_ALIASES.get(args.command)

        if command == "templates":
            list_templates(registry)
            return 0
        if unknown or command not in COMMANDS:
            if unknown:
                logger.debug(f"Unrecognized arguments: {unknown}")
            print_help(registry)
            return 0

        generator = CardGenerator(
            registry=registry,
            output_dir=args.output_dir,
            rng=random.Random(args.seed) if args.seed is not None else None,
        )
        return COMMANDS[command](generator, args.args)
    except CardGeneratorError as e:
        logger.debug("Card generation failed", exc_info=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
