"""
Funko collection command-line tool entrypoint.
Run: python funko_cli.py <command> --user <name> [options]
Commands: add, modify, remove, list, show
Reads FUNKO_DATA_DIR / FUNKO_LOG_LEVEL from the environment, .env.local or .env.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from colorama import Fore, Style, just_fix_windows_console

from collection.manager import CollectionResult, FunkoCollectionManager
from funko.models import Funko, FunkoGenre, FunkoType, ValidationError
from market.tiers import ValueTier
from storage.files import DATA_DIR

TIER_COLORS = {
    ValueTier.LOW: Fore.RED,
    ValueTier.MEDIUM_LOW: Fore.YELLOW,
    ValueTier.MEDIUM_HIGH: Fore.BLUE,
    ValueTier.HIGH: Fore.GREEN,
}


def load_env(base_dir: Optional[Path] = None) -> None:
    """Load .env.local or .env into os.environ without overriding existing values."""
    base_dir = base_dir or Path(__file__).resolve().parent
    env_path = base_dir / ".env.local"
    if not env_path.exists():
        env_path = base_dir / ".env"
    if not env_path.exists():
        return
    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                k, v = line.split("=", 1)
                os.environ.setdefault(k.strip(), v.strip().strip('"').strip("'"))


def format_funko(funko: Funko, tier: ValueTier) -> str:
    """One-line description of a Funko with its market value coloured by tier."""
    value = f"{TIER_COLORS[tier]}{funko.market_value}{Style.RESET_ALL}"
    return (
        f"{Style.BRIGHT}({funko.id}) {funko.name}{Style.RESET_ALL} ({funko.type.value})"
        f" - {funko.description}"
        f" - SpecialFeatures: {funko.special_features}"
        f" - Genre: {funko.genre.value}"
        f" - Franchise: {funko.franchise}"
        f" - FranchiseNumber: {funko.franchise_number}"
        f" - Exclusive: {str(funko.is_exclusive).lower()}"
        f" - MarketValue: {value} $"
    )


def _report(result: CollectionResult) -> int:
    color = Fore.GREEN if result.success else Fore.RED
    print(f"{color}{result.message}{Style.RESET_ALL}")
    return 0 if result.success else 1


def _funko_from_args(args: argparse.Namespace, funko_id: str) -> Funko:
    return Funko(
        id=funko_id,
        name=args.name,
        description=args.desc,
        type=args.type,
        genre=args.genre,
        franchise=args.franchise,
        franchise_number=args.number,
        is_exclusive=args.exclusive,
        special_features=args.special,
        market_value=args.value,
    )


def add_cmd(manager: FunkoCollectionManager, args: argparse.Namespace) -> int:
    """Add a new Funko (e.g. add --user ana --id 1 --name "Harry Potter" ...)."""
    return _report(manager.add_funko(_funko_from_args(args, args.id)))


def modify_cmd(manager: FunkoCollectionManager, args: argparse.Namespace) -> int:
    """Replace a Funko; --new-id stores it under a different id."""
    replacement = _funko_from_args(args, args.new_id or args.id)
    return _report(manager.modify_funko(args.id, replacement))


def remove_cmd(manager: FunkoCollectionManager, args: argparse.Namespace) -> int:
    return _report(manager.remove_funko(args.id))


def list_cmd(manager: FunkoCollectionManager, args: argparse.Namespace) -> int:
    listed = manager.list_funkos()
    if not listed:
        print(f"{Fore.YELLOW}The collection of {manager.user} is empty.{Style.RESET_ALL}")
        return 0
    print(f"{Style.BRIGHT}{manager.user} Funko Pop collection{Style.RESET_ALL}")
    for funko, tier in listed:
        print(format_funko(funko, tier))
    return 0


def show_cmd(manager: FunkoCollectionManager, args: argparse.Namespace) -> int:
    result = manager.show_funko(args.id)
    if not result.success:
        return _report(result)
    print(format_funko(result.funko, result.tier))
    return 0


def _add_funko_options(parser: argparse.ArgumentParser) -> None:
    types = ", ".join(t.value for t in FunkoType)
    genres = ", ".join(g.value for g in FunkoGenre)
    parser.add_argument("--name", required=True, help="Funko name")
    parser.add_argument("--desc", required=True, help="Funko description")
    parser.add_argument("--type", required=True, help=f"Funko type ({types})")
    parser.add_argument("--genre", required=True, help=f"Funko genre ({genres})")
    parser.add_argument("--franchise", required=True, help="Franchise the Funko belongs to")
    parser.add_argument("--number", required=True, type=int, help="Number within the franchise")
    parser.add_argument("--exclusive", action="store_true", help="Mark the Funko as exclusive")
    parser.add_argument("--special", default="None", help="Special features")
    parser.add_argument("--value", required=True, type=float, help="Market value")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="funko-collection",
        description="Manage a personal Funko Pop collection",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def command(name: str, func, help_text: str, needs_id: bool = True) -> argparse.ArgumentParser:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--user", required=True, help="Collection owner")
        sub.add_argument("--data-dir", default=None, help="Storage root (default: FUNKO_DATA_DIR or ./data)")
        if needs_id:
            sub.add_argument("--id", required=True, help="Funko ID")
        sub.set_defaults(func=func)
        return sub

    _add_funko_options(command("add", add_cmd, "Add a Funko to the collection"))
    modify = command("modify", modify_cmd, "Modify a Funko in the collection")
    modify.add_argument("--new-id", default=None, help="Store the modified Funko under this ID")
    _add_funko_options(modify)
    command("remove", remove_cmd, "Remove a Funko from the collection")
    command("list", list_cmd, "List every Funko in the collection", needs_id=False)
    command("show", show_cmd, "Show one Funko of the collection")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_env()
    logging.basicConfig(
        level=os.environ.get("FUNKO_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    just_fix_windows_console()

    args = build_parser().parse_args(argv)
    data_dir = args.data_dir or os.environ.get("FUNKO_DATA_DIR") or DATA_DIR
    try:
        manager = FunkoCollectionManager(args.user, data_dir)
        return args.func(manager, args)
    except ValidationError as e:
        print(f"{Fore.RED}{e}{Style.RESET_ALL}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
