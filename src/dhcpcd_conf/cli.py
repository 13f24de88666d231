"""
CLI interface for dhcpcd.conf reading and generation
"""

import sys
import logging
import argparse
from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from . import __version__
from .config import DEFAULT_CONF_PATH, StaticAddress, parse_address
from .document import DhcpcdConfiguration
from .errors import ConfigNotFoundError, DhcpcdConfError


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='[%(asctime)s] %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="dhcpcd-conf",
        description="Read and generate dhcpcd.conf static interface settings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show what is configured
  %(prog)s /etc/dhcpcd.conf

  # Print the regenerated file
  %(prog)s /etc/dhcpcd.conf --render

  # Set a static address (dry-run, nothing written)
  %(prog)s /etc/dhcpcd.conf --interface eth0 --ip-address 192.168.1.10/24 \\
      --router 192.168.1.1 --dns 8.8.8.8 --dry-run

  # Write the edited file somewhere else
  %(prog)s /etc/dhcpcd.conf --interface eth1 --output ./dhcpcd.conf

  # Go back to plain DHCP
  %(prog)s /etc/dhcpcd.conf --clear-static
        """
    )

    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_CONF_PATH,
        help=f"dhcpcd configuration file (default: {DEFAULT_CONF_PATH})"
    )

    # Output
    parser.add_argument(
        "--render",
        action="store_true",
        help="Print the regenerated file (with any edits) to stdout instead of writing it"
    )

    parser.add_argument(
        "--output",
        metavar="FILE",
        help="Write edits to FILE instead of back to PATH"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be written without changing any file"
    )

    # Static settings
    parser.add_argument(
        "--interface",
        metavar="NAME",
        help="Interface the static settings apply to (e.g., eth0)"
    )

    parser.add_argument(
        "--ip-address",
        metavar="ADDR/PREFIX",
        help="Static IPv4 address (e.g., 192.168.1.10/24)"
    )

    parser.add_argument(
        "--ip6-address",
        metavar="ADDR/PREFIX",
        help="Static IPv6 address (e.g., fd00::10/64)"
    )

    parser.add_argument(
        "--router",
        metavar="ADDR",
        action="append",
        help="Router address; repeat for several (replaces existing routers)"
    )

    parser.add_argument(
        "--dns",
        metavar="ADDR",
        action="append",
        help="DNS server address; repeat for several (replaces existing servers)"
    )

    parser.add_argument(
        "--clear-static",
        action="store_true",
        help="Remove all static settings so the interface uses DHCP"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"dhcpcd-conf {__version__}"
    )

    return parser


def show_document(configuration: DhcpcdConfiguration, console: Console) -> None:
    """Display the static settings of a loaded document."""
    table = Table(title="Static Settings", box=box.SIMPLE)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("interface", configuration.interface or "-")
    table.add_row("ip_address", str(configuration.static_v4) if configuration.static_v4 else "-")
    table.add_row("ip6_address", str(configuration.static_v6) if configuration.static_v6 else "-")
    table.add_row("routers", " ".join(str(ip) for ip in configuration.routers) or "-")
    table.add_row("domain_name_servers", " ".join(str(ip) for ip in configuration.dns_servers) or "-")
    console.print(table)

    if configuration.has_valid_static_settings():
        console.print("[green][OK][/green] Static settings complete")
    else:
        console.print("[yellow][!][/yellow] Static settings incomplete, only defaults will be written")

    for warning in configuration.warnings:
        console.print(f"[yellow][!][/yellow] {escape(warning)}")

    if configuration.ignored_lines:
        console.print()
        console.print("[bold cyan]Directives not preserved on save[/bold cyan]")
        for line in configuration.ignored_lines:
            console.print(f"  [dim]{escape(line)}[/dim]", highlight=False)


def apply_static_args(args: argparse.Namespace, configuration: DhcpcdConfiguration) -> bool:
    """
    Apply static setting flags to a document.

    Returns:
        True if any flag changed the document

    Raises:
        ValueError: If an address argument is malformed
    """
    changed = False

    if args.clear_static:
        configuration.clear_static()
        changed = True
    if args.interface is not None:
        configuration.interface = args.interface
        changed = True
    if args.ip_address is not None:
        configuration.static_v4 = StaticAddress.parse(args.ip_address, 4)
        changed = True
    if args.ip6_address is not None:
        configuration.static_v6 = StaticAddress.parse(args.ip6_address, 6)
        changed = True
    if args.router is not None:
        configuration.routers[:] = [parse_address(ip) for ip in args.router]
        changed = True
    if args.dns is not None:
        configuration.dns_servers[:] = [parse_address(ip) for ip in args.dns]
        changed = True

    return changed


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    console = Console()

    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        configuration = DhcpcdConfiguration.from_file(args.path)
        changed = apply_static_args(args, configuration)

        if args.render:
            for line in configuration.get_lines():
                print(line)
            return 0

        if not changed:
            show_document(configuration, console)
            console.print()
            console.print("[bold cyan]Rendered Output[/bold cyan]")
            for line in configuration.get_lines():
                console.print(f"  {escape(line)}", highlight=False)
            return 0

        if not configuration.has_valid_static_settings() and not args.clear_static:
            logger.warning("[!] Static settings incomplete; only default settings will be written")

        destination = args.output or args.path

        if args.dry_run:
            console.print(f"[yellow][DRY-RUN][/yellow] Would write {destination}:")
            for line in configuration.get_lines():
                console.print(f"  {escape(line)}", highlight=False)
            return 0

        configuration.save(destination)
        console.print(f"[green][OK][/green] Wrote {destination}")
        return 0

    except ConfigNotFoundError as e:
        logger.error(f"[FAIL] {e}")
        return 3
    except (DhcpcdConfError, ValueError) as e:
        logger.error(f"[FAIL] Configuration error: {e}")
        return 2
    except KeyboardInterrupt:
        logger.info("\n[!] Cancelled by user")
        return 130
    except OSError as e:
        logger.error(f"[FAIL] {e}", exc_info=args.verbose)
        return 1


if __name__ == "__main__":
    sys.exit(main())
