"""Main entry point for DevMatch."""

import argparse
import asyncio
import json
import sqlite3
import sys
from datetime import UTC, datetime
from pathlib import Path

import yaml
from pydantic import ValidationError

from devmatch import __version__
from devmatch.config.settings import Settings
from devmatch.errors import NotFoundError, UpstreamUnavailableError
from devmatch.utils.logging import configure_logging


def _load_posting_file(path: Path) -> dict:
    """Read a posting definition from a YAML or JSON file."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a posting mapping")
    return data


def _timestamp_run_id(prefix: str) -> str:
    timestamp = datetime.now(UTC).strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{timestamp}"


def _json_default(value: object):
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    model_dump = getattr(value, "model_dump", None)
    if callable(model_dump):
        return model_dump(mode="json")
    return str(value)


def _print_json(payload: object) -> None:
    print(json.dumps(payload, indent=2, default=_json_default))


def _write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(payload, indent=2, default=_json_default),
        encoding="utf-8",
    )


def _format_salary(posting) -> str:
    if posting.salary_min is None and posting.salary_max is None:
        return "n/a"
    if posting.salary_min == posting.salary_max:
        return f"{posting.salary_min:,.0f}"
    low = f"{posting.salary_min:,.0f}" if posting.salary_min is not None else "?"
    high = f"{posting.salary_max:,.0f}" if posting.salary_max is not None else "?"
    return f"{low} - {high}"


def _print_snapshot(snapshot) -> None:
    print(f"User: {snapshot.username}" + (f" ({snapshot.name})" if snapshot.name else ""))
    if snapshot.location:
        print(f"Location: {snapshot.location}")
    print(f"Public repositories: {snapshot.public_repos}")
    print(f"Followers: {snapshot.followers}")
    print(f"Account created: {snapshot.created_at:%Y-%m-%d}")
    print(f"Estimated commits: {snapshot.total_commits}")
    if snapshot.language_weights:
        print("Languages:")
        for language, weight in snapshot.language_weights.items():
            print(f"  - {language}: {weight}")


def _print_assessment(assessment, source: str) -> None:
    print(f"Assessment ({source}):")
    print(f"  Experience level: {assessment.experience_level}")
    print(f"  Overall score: {assessment.overall_score:.2f}")
    print(f"  Summary: {assessment.summary}")
    if assessment.skills:
        print(f"  Skills: {', '.join(assessment.skills)}")
    if assessment.strengths:
        print(f"  Strengths: {', '.join(assessment.strengths)}")


def _print_posting(posting) -> None:
    level = posting.experience_level or "-"
    print(
        f"[{posting.id}] {posting.title} @ {posting.company} "
        f"({posting.location or 'n/a'}, {posting.remote_options}, {level})"
    )
    print(f"    Salary: {_format_salary(posting)}  Posted: {posting.posted_at:%Y-%m-%d}")
    if posting.required_skills:
        print(f"    Required: {', '.join(posting.required_skills)}")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="devmatch",
        description="DevMatch: match GitHub profiles to developer job postings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m devmatch profile octocat
  python -m devmatch match octocat --location "Berlin, Germany"
  python -m devmatch postings add posting.yaml
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="mode",
        title="modes",
        description="Available commands",
    )

    profile_parser = subparsers.add_parser(
        "profile",
        help="Aggregate a GitHub profile",
    )
    profile_parser.add_argument("username", help="GitHub username")

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Aggregate and assess a GitHub profile",
    )
    analyze_parser.add_argument("username", help="GitHub username")

    match_parser = subparsers.add_parser(
        "match",
        help="Rank job postings against a GitHub profile",
    )
    match_parser.add_argument("username", help="GitHub username")
    match_parser.add_argument(
        "--location",
        type=str,
        default=None,
        help="Search location (defaults to the profile's location)",
    )

    jobs_parser = subparsers.add_parser(
        "jobs",
        help="List aggregated job postings",
    )
    jobs_parser.add_argument(
        "--location",
        type=str,
        default=None,
        help="Location hint for the job search",
    )

    for command_parser in (profile_parser, analyze_parser, match_parser, jobs_parser):
        command_parser.add_argument(
            "--json",
            action="store_true",
            help="Print the result as JSON",
        )
        command_parser.add_argument(
            "--output",
            type=Path,
            default=None,
            help="Also write the JSON result to this file",
        )
        command_parser.add_argument(
            "--save",
            action="store_true",
            help="Also write the JSON result under OUTPUT_DIR (defaults to settings)",
        )

    postings_parser = subparsers.add_parser(
        "postings",
        help="Manage stored job postings (list, show, add, update, deactivate)",
    )
    postings_parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="Override postings DB path (defaults to settings)",
    )
    postings_subparsers = postings_parser.add_subparsers(
        dest="postings_cmd",
        title="postings",
        description="Posting store operations",
        required=True,
    )

    postings_list = postings_subparsers.add_parser("list", help="List active postings")
    postings_list.add_argument("--json", action="store_true", help="Print as JSON")

    postings_show = postings_subparsers.add_parser("show", help="Show one posting")
    postings_show.add_argument("id", type=int, help="Posting id")

    postings_add = postings_subparsers.add_parser("add", help="Create a posting")
    postings_add.add_argument("file", type=Path, help="YAML or JSON posting file")

    postings_update = postings_subparsers.add_parser("update", help="Replace a posting")
    postings_update.add_argument("id", type=int, help="Posting id")
    postings_update.add_argument("file", type=Path, help="YAML or JSON posting file")

    postings_deactivate = postings_subparsers.add_parser(
        "deactivate", help="Deactivate (soft delete) a posting"
    )
    postings_deactivate.add_argument("id", type=int, help="Posting id")

    return parser


async def _run_pipeline_command(parsed: argparse.Namespace, settings: Settings):
    from devmatch.matching import service as matching

    if parsed.mode == "analyze":
        return await matching.run_analysis(parsed.username, settings)
    if parsed.mode == "match":
        return await matching.run_matching(
            parsed.username, settings, location=parsed.location
        )

    async with matching.open_matching_service(settings) as service:
        if parsed.mode == "profile":
            return await service.profiles.aggregate(parsed.username)
        return await service.jobs.collect(parsed.location)


def _print_pipeline_result(mode: str, result) -> None:
    if mode == "profile":
        _print_snapshot(result)
        return

    if mode == "analyze":
        _print_snapshot(result.snapshot)
        print()
        _print_assessment(result.assessment, result.assessment_source)
        return

    if mode == "match":
        _print_assessment(result.assessment, result.assessment_source)
        print()
        if not result.matches:
            print("No postings to match.")
            return
        print(f"Top matches ({len(result.matches)} of {result.postings_considered} postings):")
        for match in result.matches:
            print(f"  {match.match_score:.2f}  {match.job_title} @ {match.company}")
            print(f"        {match.rationale}")
        return

    if not result:
        print("No postings found.")
        return
    for posting in result:
        _print_posting(posting)


async def _run_postings_command(parsed: argparse.Namespace, settings: Settings) -> int:
    from devmatch.jobs.models import JobPostingInput
    from devmatch.jobs.repository import JobPostingRepository

    db_path = parsed.db or settings.database_path
    repo = JobPostingRepository(db_path)
    try:
        await repo.initialize()
    except (OSError, sqlite3.Error) as e:
        await repo.close()
        print(f"Cannot open postings database {db_path}: {e}", file=sys.stderr)
        return 1

    try:
        if parsed.postings_cmd == "list":
            postings = await repo.list_active()
            if parsed.json:
                _print_json([posting.to_dict() for posting in postings])
            elif not postings:
                print("No active postings.")
            else:
                for posting in postings:
                    _print_posting(posting)
            return 0

        if parsed.postings_cmd == "show":
            posting = await repo.get(parsed.id)
            if posting is None:
                print(f"Posting {parsed.id} not found", file=sys.stderr)
                return 1
            _print_json(posting.to_dict())
            return 0

        if parsed.postings_cmd in {"add", "update"}:
            try:
                data = JobPostingInput.model_validate(_load_posting_file(parsed.file))
            except (OSError, ValueError, yaml.YAMLError) as e:
                print(f"Invalid posting file: {e}", file=sys.stderr)
                return 1

            if parsed.postings_cmd == "add":
                posting = await repo.create(data)
                print(f"Created posting {posting.id}: {posting.title} @ {posting.company}")
                return 0

            posting = await repo.update(parsed.id, data)
            if posting is None:
                print(f"Posting {parsed.id} not found", file=sys.stderr)
                return 1
            print(f"Updated posting {posting.id}: {posting.title} @ {posting.company}")
            return 0

        if parsed.postings_cmd == "deactivate":
            if not await repo.deactivate(parsed.id):
                print(f"Posting {parsed.id} not found", file=sys.stderr)
                return 1
            print(f"Deactivated posting {parsed.id}")
            return 0

        print(f"Unknown postings command: {parsed.postings_cmd}", file=sys.stderr)
        return 1
    finally:
        await repo.close()


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.mode is None:
        parser.print_help()
        return 0

    logger.info(f"DevMatch v{__version__} starting in {parsed.mode} mode")

    if parsed.mode == "postings":
        return asyncio.run(_run_postings_command(parsed, settings))

    try:
        result = asyncio.run(_run_pipeline_command(parsed, settings))
    except NotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UpstreamUnavailableError as e:
        print(f"Error: GitHub is temporarily unavailable ({e})", file=sys.stderr)
        return 1

    payload = (
        [posting.to_dict() for posting in result]
        if parsed.mode == "jobs"
        else result.to_dict()
    )

    output_path = parsed.output
    if output_path is None and parsed.save:
        output_path = settings.output_dir / f"{_timestamp_run_id(parsed.mode)}.json"
    if output_path is not None:
        _write_json(output_path, payload)
        logger.info(f"Wrote: {output_path}")

    if parsed.json:
        _print_json(payload)
    else:
        _print_pipeline_result(parsed.mode, result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
