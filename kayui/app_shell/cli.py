import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any

from kayui.components.ids import DEFAULT_PREFIX, generate_id
from kayui.components.responsive import compile_responsive
from kayui.components.styles import (
    ColorRole,
    ComponentKind,
    InteractionState,
    Size,
    StyleIntent,
    resolve_style,
)
from kayui.domain.defaults import DEFAULT_TOKENS
from kayui.domain.entities import DesignTokens
from kayui.domain.errors import KayUIError
from kayui.rules.loader import load_theme, load_yaml_document

logger = logging.getLogger("kayui.cli")


def get_tokens(theme: str | None) -> DesignTokens:
    if theme is None:
        return DEFAULT_TOKENS
    return load_theme(Path(theme))


def handle_tokens(args: argparse.Namespace) -> Any:
    return get_tokens(args.theme).as_dict()


def handle_resolve(args: argparse.Namespace) -> Any:
    intent = StyleIntent(
        kind=args.kind,
        variant=args.variant,
        color_role=args.color,
        size=args.size,
        states=frozenset(args.state),
        elevation=args.elevation,
        raised=args.raised,
        hoverable=args.hoverable,
        clickable=args.clickable,
        full_width=args.full_width,
    )
    descriptor = resolve_style(intent, get_tokens(args.theme))
    if args.css:
        return descriptor.to_css()
    return dataclasses.asdict(descriptor)


def handle_responsive(args: argparse.Namespace) -> Any:
    fragments = load_yaml_document(Path(args.file))
    if not isinstance(fragments, dict):
        raise ValueError(f"{args.file} must hold a mapping of breakpoint name to style")

    rules = compile_responsive(fragments, get_tokens(args.theme))
    return [
        {
            "breakpoint": rule.breakpoint,
            "minWidth": rule.min_width,
            "mediaQuery": rule.media_query,
            "style": rule.style,
        }
        for rule in rules
    ]


def handle_id(args: argparse.Namespace) -> Any:
    return generate_id(args.prefix)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kayui", description="Kay UI design-token tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # tokens
    tokens_parser = subparsers.add_parser("tokens", help="Print the effective token tree")
    tokens_parser.add_argument("--theme", help="Theme YAML file to apply")
    tokens_parser.set_defaults(handler=handle_tokens)

    # resolve
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a component style")
    resolve_parser.add_argument("kind", choices=[k.value for k in ComponentKind])
    resolve_parser.add_argument("--variant", help="Variant (defaults per kind)")
    resolve_parser.add_argument("--color", default=ColorRole.PRIMARY.value, help="Color role")
    resolve_parser.add_argument("--size", default=Size.MEDIUM.value, help="small, medium or large")
    resolve_parser.add_argument(
        "--state",
        action="append",
        default=[],
        choices=[s.value for s in InteractionState],
        help="Interaction state (repeatable)",
    )
    resolve_parser.add_argument("--elevation", type=int, default=1, help="Container elevation")
    resolve_parser.add_argument("--raised", action="store_true")
    resolve_parser.add_argument("--hoverable", action="store_true")
    resolve_parser.add_argument("--clickable", action="store_true")
    resolve_parser.add_argument("--full-width", action="store_true")
    resolve_parser.add_argument("--theme", help="Theme YAML file to apply")
    resolve_parser.add_argument("--css", action="store_true", help="Print CSS properties only")
    resolve_parser.set_defaults(handler=handle_resolve)

    # responsive
    responsive_parser = subparsers.add_parser(
        "responsive", help="Compile breakpoint fragments into media rules"
    )
    responsive_parser.add_argument("file", help="YAML/JSON map of breakpoint -> style")
    responsive_parser.add_argument("--theme", help="Theme YAML file to apply")
    responsive_parser.set_defaults(handler=handle_responsive)

    # id
    id_parser = subparsers.add_parser("id", help="Generate an element id")
    id_parser.add_argument("--prefix", default=DEFAULT_PREFIX)
    id_parser.set_defaults(handler=handle_id)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        result = args.handler(args)
    except (KayUIError, ValueError, FileNotFoundError) as e:
        logger.error("%s", e)
        sys.exit(1)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
