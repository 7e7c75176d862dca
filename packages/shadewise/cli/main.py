"""Command-line interface for shadewise.

Examples::

    shadewise ratio "#777777" "#FFFFFF"
    shadewise adjust "#FF0000" --against "#0000FF" --target 7
    shadewise audit "#FFFFFF" "#F2F2F7" "#007AFF" "#000000"
    shadewise themes --theme ocean --scheme dark
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shadewise.core.color import (
    WCAG_AA_THRESHOLD,
    WCAG_AAA_THRESHOLD,
    BrightnessMethod,
    ColorSample,
    ColorScheme,
    ShadewiseError,
    brightness,
    classify,
    contrast_ratio,
    read_components,
)
from shadewise.core.config import AppConfig, configure_logging, load_app_config
from shadewise.core.contrast import BlendStyle, ContrastDirection, optimize_contrast
from shadewise.core.palette import low_contrast_pairs
from shadewise.core.theming import (
    ColorKey,
    ThemeContext,
    ThemeDefinition,
    create_default_catalog,
    register_theme_files,
)

console = Console()
logger = logging.getLogger(__name__)


def _pass_fail(ok: bool) -> str:
    return "[green]PASS[/green]" if ok else "[red]FAIL[/red]"


def _swatch(color: ColorSample) -> str:
    return f"[on #{color.to_hex()}]    [/] #{color.to_hex()}"


def build_theme_context(config: AppConfig) -> ThemeContext:
    """Catalog with builtins plus configured theme files, wrapped in a context."""
    catalog = create_default_catalog()
    register_theme_files(catalog, config.themes.theme_files)
    return ThemeContext(
        catalog,
        state_path=config.themes.state_file,
        default_theme_id=config.themes.default_theme,
    )


# ----------------------------------------------------------------------
# Commands
# ----------------------------------------------------------------------


def cmd_ratio(args: argparse.Namespace, config: AppConfig) -> int:
    first = read_components(args.first)
    second = read_components(args.second)
    ratio = contrast_ratio(first, second)

    console.print(f"Contrast ratio: [bold]{ratio:.2f}:1[/bold]")
    aa = _pass_fail(ratio >= WCAG_AA_THRESHOLD)
    aaa = _pass_fail(ratio >= WCAG_AAA_THRESHOLD)
    console.print(f"  WCAG AA  ({WCAG_AA_THRESHOLD:g}:1): {aa}")
    console.print(f"  WCAG AAA ({WCAG_AAA_THRESHOLD:g}:1): {aaa}")
    return 0


def cmd_classify(args: argparse.Namespace, config: AppConfig) -> int:
    method = BrightnessMethod(args.method or config.contrast.method)
    color = read_components(args.color)
    label = classify(color, threshold=args.threshold, method=method)

    console.print(f"{_swatch(color)} is [bold]{label.value}[/bold]")
    console.print(f"  Brightness ({method.value}): {brightness(color, method):.4f}")
    console.print(f"  Recommended scheme: {label.scheme.value}")
    return 0


def cmd_adjust(args: argparse.Namespace, config: AppConfig) -> int:
    defaults = config.contrast
    against = args.against if args.against is not None else args.color

    minimum_blend = args.minimum_blend
    blend_range = tuple(args.range) if args.range else None
    blend_style = args.style
    if minimum_blend is None and blend_style is None and blend_range is None:
        blend_style = defaults.blend_style

    result = optimize_contrast(
        args.color,
        against,
        method=defaults.method,
        target_ratio=args.target if args.target is not None else defaults.target_ratio,
        direction=args.direction or defaults.direction,
        minimum_blend=minimum_blend,
        blend_style=blend_style,
        blend_range=blend_range,
        settings=defaults.search_settings(),
    )

    console.print(f"{_swatch(result.color)}  [bold]#{result.color.to_hex()}[/bold]")
    console.print(f"  Contrast: {result.contrast_ratio:.2f}:1 (target {result.target_ratio:g}:1)")
    if result.unchanged:
        console.print("  Already meets the target; unchanged.")
    else:
        console.print(
            f"  Blended {result.blend_ratio:.1%} toward {result.anchor.value} "
            f"in {result.iterations} steps"
        )
    if not result.target_met:
        console.print("[yellow]WARNING: target not reachable within the blend range[/yellow]")
    return 0


def cmd_audit(args: argparse.Namespace, config: AppConfig) -> int:
    threshold = args.threshold if args.threshold is not None else config.contrast.target_ratio
    colors = [read_components(c) for c in args.colors]
    pairs = low_contrast_pairs(colors, threshold=threshold)

    if not pairs:
        console.print(f"[green]All {len(colors)} colors pass {threshold:g}:1 pairwise[/green]")
        return 0

    table = Table(title=f"Pairs below {threshold:g}:1")
    table.add_column("First")
    table.add_column("Second")
    table.add_column("Ratio", justify="right")
    for pair in pairs:
        table.add_row(
            f"#{colors[pair.first].to_hex()}",
            f"#{colors[pair.second].to_hex()}",
            f"{pair.ratio:.2f}",
        )
    console.print(table)
    return 0


def _show_theme(theme: ThemeDefinition, scheme: ColorScheme) -> None:
    table = Table(title=f"{theme.title} ({scheme.value})")
    table.add_column("Key")
    table.add_column("Color")
    table.add_column("vs background", justify="right")

    background = (
        theme.color(ColorKey.BACKGROUND, scheme) if theme.has_color(ColorKey.BACKGROUND) else None
    )
    for key in theme.defined_keys:
        if theme.colors[key].for_scheme(scheme) is None:
            table.add_row(key, "[dim]undefined[/dim]", "")
            continue
        color = theme.color(key, scheme)
        ratio = f"{contrast_ratio(color, background):.2f}" if background is not None else "-"
        table.add_row(key, _swatch(color), ratio)
    console.print(table)


def cmd_themes(args: argparse.Namespace, config: AppConfig) -> int:
    context = build_theme_context(config)

    if args.use:
        context.set_current(args.use)
        console.print(f"[green]Current theme: {context.current.theme_id}[/green]")
        return 0

    if args.theme:
        _show_theme(context.load(args.theme), ColorScheme(args.scheme))
        return 0

    current_id = context.current.theme_id
    table = Table(title="Themes")
    table.add_column("")
    table.add_column("ID")
    table.add_column("Title")
    table.add_column("Colors", justify="right")
    for info in context.catalog.list_all():
        marker = "*" if info.theme_id == current_id else ""
        table.add_row(marker, info.theme_id, info.title, str(info.color_count))
    console.print(table)
    return 0


# ----------------------------------------------------------------------
# Parser
# ----------------------------------------------------------------------


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="shadewise",
        description="shadewise - WCAG contrast analysis and color optimization",
    )
    p.add_argument(
        "--app-config",
        default=None,
        help="Path to app config JSON/YAML (default: shadewise.json if present)",
    )
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help="Override the configured log level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    ratio = sub.add_parser("ratio", help="Contrast ratio between two colors")
    ratio.add_argument("first", help="First color (hex)")
    ratio.add_argument("second", help="Second color (hex)")
    ratio.set_defaults(handler=cmd_ratio)

    cls = sub.add_parser("classify", help="Classify a color as light or dark")
    cls.add_argument("color", help="Color (hex)")
    cls.add_argument("--method", choices=[m.value for m in BrightnessMethod], default=None)
    cls.add_argument("--threshold", type=float, default=0.5, help="Brightness cutoff")
    cls.set_defaults(handler=cmd_classify)

    adjust = sub.add_parser("adjust", help="Optimize a color for contrast")
    adjust.add_argument("color", help="Color to optimize (hex)")
    adjust.add_argument(
        "--against", default=None, help="Background color (default: the color itself)"
    )
    adjust.add_argument("--target", type=float, default=None, help="Target contrast ratio")
    adjust.add_argument(
        "--direction", choices=[d.value for d in ContrastDirection], default=None
    )
    blend_group = adjust.add_mutually_exclusive_group()
    blend_group.add_argument("--style", choices=[s.value for s in BlendStyle], default=None)
    blend_group.add_argument("--minimum-blend", type=float, default=None)
    blend_group.add_argument(
        "--range", type=float, nargs=2, metavar=("LO", "HI"), default=None
    )
    adjust.set_defaults(handler=cmd_adjust)

    audit = sub.add_parser("audit", help="Find low-contrast pairs in a palette")
    audit.add_argument("colors", nargs="+", help="Palette colors (hex)")
    audit.add_argument("--threshold", type=float, default=None, help="Minimum ratio")
    audit.set_defaults(handler=cmd_audit)

    themes = sub.add_parser("themes", help="List or inspect themes")
    themes.add_argument("--theme", default=None, help="Theme to show")
    themes.add_argument(
        "--scheme", choices=[s.value for s in ColorScheme], default=ColorScheme.LIGHT.value
    )
    themes.add_argument("--use", default=None, help="Set the current theme")
    themes.set_defaults(handler=cmd_themes)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        config = load_app_config(Path(args.app_config) if args.app_config else None)
    except (OSError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {escape(str(e))}[/red]")
        return 1

    if args.log_level:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": args.log_level})}
        )
    configure_logging(config)

    try:
        return args.handler(args, config)
    except (ShadewiseError, ValueError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
