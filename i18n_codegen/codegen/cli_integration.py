"""
CLI integration for code generation functionality.

Provides the ``generate`` and ``config`` sub-commands.
"""

import argparse
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import (
    GenerationResult,
    GeneratorConfig,
    generate_from_document,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
    load_config,
)
from .registry import RegistryError, is_language_supported
from .core.config import ConfigError, get_config_manager
from ..logging_config import get_logger
from ..utils import DocumentLoadError, load_resource_document

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_codegen_subparser(subparsers) -> argparse.ArgumentParser:
    """
    Create the ``generate`` subcommand parser.

    For use with: i18n-codegen generate [options]

    Args:
        subparsers: Subparser group from main parser

    Returns:
        Configured subparser for the generate command
    """
    parser = subparsers.add_parser(
        "generate",
        help="Generate the i18n accessor class from a resource document",
        description="Generate a localization accessor class from translated strings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  i18n-codegen generate strings.json
  i18n-codegen generate -o lib/i18n.dart --class-name Strings strings.json
  i18n-codegen generate --stdin < strings.json
  i18n-codegen generate --list-languages
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Resource document (JSON)")
    input_group.add_argument("--url", help="URL to fetch the resource document from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the resource document from stdin"
    )

    parser.add_argument(
        "--language", "-l", default="dart", help="Target language (default: dart)"
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument("--class-name", help="Name of the generated class")
    parser.add_argument(
        "--key-case",
        choices=["camel", "pascal", "snake"],
        help="Case style of accessor names derived from keys",
    )
    parser.add_argument(
        "--no-docs",
        action="store_true",
        help="Don't add translation tables above the accessors",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )

    dart_group = parser.add_argument_group("Dart-specific options")
    dart_group.add_argument("--lookup-type", help="Type of the default lookup")
    dart_group.add_argument(
        "--custom-lookup-type", help="Type of the optional custom lookup"
    )
    dart_group.add_argument("--delegate-type", help="Type of the delegate")
    dart_group.add_argument(
        "--no-context-accessor",
        action="store_true",
        help="Don't generate the of(BuildContext) helper",
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed info about a language and exit",
    )

    parser.set_defaults(func=handle_generate_command)
    return parser


def create_config_subparser(subparsers) -> argparse.ArgumentParser:
    """Create the ``config`` subcommand that writes a default config file."""
    parser = subparsers.add_parser(
        "config",
        help="Write the default configuration to a JSON file",
    )
    parser.add_argument(
        "--language", "-l", default="dart", help="Target language (default: dart)"
    )
    parser.add_argument(
        "--output", "-o", default="i18n_codegen.json", help="Configuration file path"
    )
    parser.set_defaults(func=handle_config_command)
    return parser


def handle_generate_command(args: argparse.Namespace) -> int:
    """
    Handle the generate subcommand.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        if not (args.file or args.url or args.stdin):
            console.print(
                "[red]✗[/red] Input source required (file, --url, or --stdin)"
            )
            return 1

        if not _validate_language(args.language):
            return 1

        document = _get_input_data(args)
        config = _build_config(args)

        return _generate_and_output(document, args.language, config, args)

    except (CLIError, RegistryError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def handle_config_command(args: argparse.Namespace) -> int:
    """Write the default configuration for a language."""
    if not _validate_language(args.language):
        return 1

    manager = get_config_manager()
    try:
        manager.save_config(manager.get_config(args.language), args.output)
    except ConfigError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    console.print(f"[green]✓[/green] Configuration written to [cyan]{args.output}[/cyan]")
    return 0


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {lang_name}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()

    console.print(
        Panel(
            "[bold]Usage:[/bold] i18n-codegen generate [dim]strings.json[/dim] "
            "--language [cyan]LANGUAGE[/cyan]\n"
            "[bold]Info:[/bold] i18n-codegen generate --language-info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )

    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not _validate_language(language, silent=True):
        console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    info = get_language_info(language)

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(
            info_text,
            title=f"🔧 {info['name'].title()} Generator",
            border_style="green",
        )
    )

    generator = get_generator(language)
    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")

    settings = {"key_case": generator.config.key_case}
    if hasattr(generator, "get_info"):
        settings.update(generator.get_info())
    for key, value in settings.items():
        config_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(config_table)

    return 0


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language is supported."""
    supported = list_supported_languages()
    if not is_language_supported(language):
        if not silent:
            console.print(f"[red]✗ Unsupported language '{language}'[/red]")
            console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
        return False
    return True


def _get_input_data(args: argparse.Namespace):
    """Get the resource document from the selected source."""
    try:
        source, document = load_resource_document(
            file_path=args.file,
            url=args.url,
            stream=sys.stdin if args.stdin else None,
        )
    except DocumentLoadError as e:
        raise CLIError(f"Failed to load input: {e}") from e

    logger.debug("Loaded resource document from %s", source)
    return document


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    config_dict = {}
    custom = {}

    if args.class_name:
        config_dict["class_name"] = args.class_name
    if args.key_case:
        config_dict["key_case"] = args.key_case
    if args.no_docs:
        config_dict["add_comments"] = False
    if args.output:
        config_dict["output_file"] = args.output

    if args.lookup_type:
        custom["lookup_type"] = args.lookup_type
    if args.custom_lookup_type:
        custom["custom_lookup_type"] = args.custom_lookup_type
    if args.delegate_type:
        custom["delegate_type"] = args.delegate_type
    if args.no_context_accessor:
        custom["context_accessor"] = False
    if custom:
        config_dict["custom"] = custom

    try:
        config = load_config(
            args.language, custom_config=config_dict, config_file=args.config
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    problems = get_config_manager().validate_config(config)
    if problems:
        raise CLIError("; ".join(problems))
    return config


def _generate_and_output(
    document, language: str, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    with console.status(f"[green]Generating {language} code..."):
        result = generate_from_document(document, language, config)

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    if config.output_file:
        output_path = Path(config.output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(
            f"[green]✓[/green] Generated {language} code saved to [cyan]{output_path}[/cyan]"
        )
    elif console.is_terminal:
        console.print(Syntax(result.code, language, theme="monokai"))
    else:
        # Piped output stays byte-exact
        sys.stdout.write(result.code)

    if getattr(args, "verbose", False) and result.metadata:
        _print_metadata(result)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0


def _print_metadata(result: GenerationResult):
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)
