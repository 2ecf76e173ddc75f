"""Main CLI entry point for pwnotify."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from pwnotify.config.config_loader import ConfigError, ConfigLoader
from pwnotify.config.run_config import RunConfig
from pwnotify.services.directory.base import DirectorySource, DirectorySourceError
from pwnotify.services.mail.base import MailTransportError
from pwnotify.services.mail.smtp_sink import SmtpMailSink
from pwnotify.services.orchestrator import PasswordExpiryNotifier
from pwnotify.services.reporting.run_reporter import RunReporter


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_directory(config: RunConfig) -> DirectorySource:
    """Create the LDAP directory source from config."""
    if config.directory is None:
        raise DirectorySourceError("No directory settings in configuration")
    from pwnotify.services.directory.ldap_source import LdapDirectorySource

    return LdapDirectorySource(config.directory)


def run_notifications(
    config_path: Optional[Path] = None,
    report_path: Optional[Path] = None,
    dry_run: bool = False,
    directory: Optional[DirectorySource] = None,
    mail=None,
) -> int:
    """
    Run a notification pass.

    Args:
        config_path: Optional custom config file path
        report_path: Optional report path overriding the config
        dry_run: Do not send any mail
        directory: Optional directory source (default: LDAP from config)
        mail: Optional mail sink (default: SMTP from config)

    Returns:
        Process exit code
    """
    try:
        config = ConfigLoader(config_path).load()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if report_path is not None:
        config = config.model_copy(update={"report_path": str(report_path)})

    mail = mail or SmtpMailSink(config.smtp_host, config.smtp_port)
    try:
        directory = directory or build_directory(config)
        notifier = PasswordExpiryNotifier(
            config,
            directory,
            mail,
            reporter=RunReporter(config.get_report_path()),
            dry_run=dry_run,
        )
        result = notifier.run()
    except MailTransportError as e:
        print(f"Mail transport error: {e}", file=sys.stderr)
        return 1
    except DirectorySourceError as e:
        print(f"Directory error: {e}", file=sys.stderr)
        return 1

    print(f"Processed {len(result.outcomes)} accounts, report written to {result.report_path}")
    if result.failures:
        print(f"{len(result.failures)} accounts could not be processed")
    if result.summary_error is not None:
        print(f"Warning: report was not mailed: {result.summary_error}", file=sys.stderr)
    return 0


def cmd_run(args) -> int:
    """Run notifications command."""
    return run_notifications(args.config, args.report, args.dry_run)


def cmd_check_config(args) -> int:
    """Validate configuration command."""
    try:
        config = ConfigLoader(args.config).load()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    print(f"Configuration OK: policy {config.password_policy_days} days, "
          f"thresholds {config.lower_threshold_days}/{config.upper_threshold_days} days, "
          f"{len(config.exclusions)} exclusions")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="pwnotify - Password expiration notifications")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run command (default)
    run_parser = subparsers.add_parser("run", help="Notify users and mail the report")
    run_parser.add_argument("--config", type=Path, help="Custom config file path")
    run_parser.add_argument("--report", type=Path, help="Custom report output path")
    run_parser.add_argument("--dry-run", action="store_true", help="Do not send any mail")
    run_parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    # Check-config command
    check_parser = subparsers.add_parser("check-config", help="Validate configuration")
    check_parser.add_argument("--config", type=Path, help="Custom config file path")
    check_parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    return parser


def main(argv=None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(args, "verbose", False))

    if args.command is None or args.command == "run":
        if args.command is None:
            args.config, args.report, args.dry_run = None, None, False
        return cmd_run(args)
    if args.command == "check-config":
        return cmd_check_config(args)
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
