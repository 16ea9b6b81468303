"""
Command-line interface for VIDAI.

Provides commands to submit a single video or a batch of videos for
Cloudinary AI chaptering, transcription and translation.
"""
import sys
from pathlib import Path
from typing import Optional

import click
from click.core import ParameterSource
from rich.console import Console

from . import __version__
from .core.config import get_config
from .core.exceptions import ConfigurationError, VidaiError
from .core.types import AssetType, ExecutionMode, ProcessingOptions
from .input import collect_identifiers
from .logging import setup_logging, get_logger, console as log_console
from .progress import BatchProgressTracker, ProgressReporter, print_summary, print_submission
from .scheduler import BatchScheduler, coerce_concurrency
from .submission import VideoSubmitter

ASSET_TYPES = [t.value for t in AssetType]


def print_banner(title: str):
    """Print application banner."""
    click.echo(f"""
============================================================
                    VIDAI v{__version__}
{title:^60}
============================================================
""")


def report_error(error: VidaiError):
    """Log a VIDAI error and list its suggestions."""
    get_logger("cli").error(error.message)
    if error.suggestions:
        click.echo("\nSuggestions:")
        for i, tip in enumerate(error.suggestions, 1):
            click.echo(f"  {i}. {tip}")


def build_options(asset_type: str, notification_url: Optional[str], invalidate: bool) -> ProcessingOptions:
    return ProcessingOptions(
        asset_type=AssetType(asset_type),
        notification_url=notification_url or None,
        invalidate=invalidate,
    )


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path),
              help="Also write logs to this rotating file")
@click.option("--json-log", is_flag=True, help="Write the log file as JSON lines")
def cli(debug, log_file, json_log):
    """VIDAI - Cloudinary Video AI Processing Tool"""
    try:
        config = get_config()
        config.validate_settings()
    except ConfigurationError as e:
        report_error(e)
        sys.exit(1)

    setup_logging(
        level="DEBUG" if debug else config.log.level,
        log_file=log_file,
        json_format=json_log,
    )


def asset_options(func):
    """Options shared by the process and batch commands."""
    func = click.option("--invalidate", is_flag=True, default=False,
                        help="Invalidate cached versions")(func)
    func = click.option("--notification-url", metavar="URL",
                        help="Webhook URL for completion notifications")(func)
    func = click.option("--type", "asset_type", default=AssetType.UPLOAD.value,
                        type=click.Choice(ASSET_TYPES), show_default=True,
                        help="Asset type")(func)
    return func


@cli.command()
@click.argument("public_id")
@asset_options
def process(public_id, asset_type, notification_url, invalidate):
    """Start AI chaptering, transcription and translation for one video."""
    print_banner("Cloudinary Video AI Processing Tool")
    logger = get_logger("cli")
    config = get_config()
    options = build_options(asset_type, notification_url, invalidate)

    try:
        config.validate_credentials()
        submitter = VideoSubmitter(config.cloudinary, config.submission.translation_languages)

        logger.info(f"Starting AI processing for video: {public_id}")
        logger.info("Features enabled: chapters, transcription, translations")
        logger.info(f"Translation languages: {', '.join(submitter.languages)}")

        result = submitter.submit(public_id, options)
        logger.info("Explicit method call successful!")

        print_submission(
            public_id,
            result,
            submitter.languages,
            Console(),
            notification_url=options.notification_url,
        )
        click.echo("\nScript completed successfully!")

    except VidaiError as e:
        report_error(e)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)


@cli.command()
@click.argument("video_ids", nargs=-1)
@click.option("--file", "file_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Read video IDs from file (one per line)")
@click.option("--parallel", "parallel", metavar="NUM", default=None,
              help="Process NUM videos in parallel (default: 2)")
@click.option("--sequential", is_flag=True, help="Process videos one at a time")
@asset_options
@click.pass_context
def batch(ctx, video_ids, file_path, parallel, sequential, asset_type, notification_url, invalidate):
    """Submit many videos, in parallel batches or one at a time.

    \b
    Examples:
      vidai batch video1 video2 video3
      vidai batch --file=video-ids.txt
      vidai batch --file=video-ids.txt --parallel=3
      vidai batch --file=video-ids.txt --sequential
    """
    bare = not video_ids and all(
        ctx.get_parameter_source(name) == ParameterSource.DEFAULT
        for name in ctx.params if name != "video_ids"
    )
    if bare:
        click.echo(ctx.get_help())
        ctx.exit(0)

    print_banner("Cloudinary Batch Video AI Processing Tool")
    logger = get_logger("cli")
    config = get_config()
    options = build_options(asset_type, notification_url, invalidate)

    if sequential:
        mode = ExecutionMode.sequential()
    else:
        default = config.scheduler.concurrency
        concurrency = coerce_concurrency(parallel if parallel is not None else default)
        mode = ExecutionMode.parallel(concurrency)

    try:
        identifiers = collect_identifiers(video_ids, file_path)
        config.validate_credentials()

        submitter = VideoSubmitter(config.cloudinary, config.submission.translation_languages)
        scheduler = BatchScheduler.from_config(submitter, config.scheduler)
        tracker = BatchProgressTracker(len(identifiers), mode.concurrency)

        with ProgressReporter(tracker, log_console) as reporter:
            report = scheduler.run(identifiers, options, mode, tracker=tracker)

        print_summary(report, Console(), elapsed=reporter.elapsed)

    except VidaiError as e:
        report_error(e)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)

    if report.all_succeeded:
        click.echo("\nAll videos submitted for processing successfully!")
    else:
        click.echo("\nSome videos failed to process. Check the errors above.")
    sys.exit(report.exit_code)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
