"""
Resume Screener CLI - Command line interface for bulk resume screening.

Usage:
    python -m resume_screener [command] [options]

Commands:
    screen      Score resumes against a job description and rank them
    config      Manage configuration

Examples:
    python -m resume_screener screen resumes/ --job job.txt
    python -m resume_screener screen batch.zip --job-text "Python developer" --output results.csv
    python -m resume_screener screen a.pdf b.docx --job job.txt --weight skills=0.5 --details
    python -m resume_screener screen resumes/ --job job.txt --json
    python -m resume_screener config --set weights.keywords 0.2
"""

from concurrent.futures import ThreadPoolExecutor
import argparse
import json
import logging
import sys

from resume_screener.batch import BatchProcessor, BatchRunResult, ResultsExporter
from resume_screener.core import BatchJob, CriteriaWeights, Document, DocumentStatus
from resume_screener.core.errors import ConfigurationError
from resume_screener.sources import collect_documents
from resume_screener.utils import Config


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Resume Screener - Heuristic bulk screening of candidate resumes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", "-c", help="Path to config file")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Screen command
    screen_parser = subparsers.add_parser("screen", help="Screen resumes against a job description")
    screen_parser.add_argument("paths", nargs="+", help="Resume files, directories or ZIP archives")
    job_group = screen_parser.add_mutually_exclusive_group(required=True)
    job_group.add_argument("--job", "-j", help="Path to job description text file")
    job_group.add_argument("--job-text", help="Job description text")
    screen_parser.add_argument(
        "--weight", "-w", action="append", default=[], metavar="NAME=VALUE",
        help="Override a weight (skills, experience, education, keywords)",
    )
    screen_parser.add_argument("--output", "-o", help="Export file path")
    screen_parser.add_argument("--export", action="store_true", help="Export to the configured output directory")
    screen_parser.add_argument("--format", "-f", choices=["csv", "json"], help="Export format")
    screen_parser.add_argument("--top", "-t", type=int, default=10, help="Show top N candidates")
    screen_parser.add_argument("--details", "-d", action="store_true", help="Show strengths and weaknesses")
    screen_parser.add_argument("--json", action="store_true", help="Print the run summary and ranked documents as JSON")

    # Config command
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument("--show", action="store_true", help="Show current config")
    config_parser.add_argument("--set", nargs=2, metavar=("KEY", "VALUE"), help="Set a config value")
    config_parser.add_argument("--init", action="store_true", help="Initialize default config")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = Config(args.config)

        if args.command == "screen":
            cmd_screen(args, config)
        elif args.command == "config":
            cmd_config(args, config)
        else:
            parser.print_help()

    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)


def parse_weight_overrides(overrides: list[str], weights: CriteriaWeights) -> CriteriaWeights:
    """Apply NAME=VALUE overrides on top of the configured weights."""
    values = weights.to_dict()

    for override in overrides:
        name, sep, raw_value = override.partition("=")
        name = name.strip().lower()
        if not sep or name not in CriteriaWeights.KEYS:
            raise ConfigurationError(f"Invalid weight override: {override!r}")
        try:
            values[name] = float(raw_value)
        except ValueError as e:
            raise ConfigurationError(f"Weight {name} must be a number, got {raw_value!r}") from e

    return CriteriaWeights.from_dict(values)


def load_job_description(args) -> str:
    if args.job:
        with open(args.job, 'r', encoding='utf-8') as f:
            return f.read()
    return args.job_text or ""


def cmd_screen(args, config: Config):
    """Execute screen command."""
    weights = parse_weight_overrides(args.weight, config.get_weights())
    job_description = load_job_description(args)

    documents = collect_documents(args.paths)
    if not documents:
        print("No supported resumes found (PDF, DOCX, TXT or ZIP).")
        return

    job = BatchJob(job_description=job_description)
    job.add_documents(documents)

    print(f"📄 Screening {len(documents)} resumes...")
    print(
        f"   Weights: skills {weights.skills:.2f} | experience {weights.experience:.2f} | "
        f"education {weights.education:.2f} | keywords {weights.keywords:.2f} (total {weights.total:.2f})"
    )

    processor = BatchProcessor(
        weights=weights,
        throttle_seconds=config.get_throttle_seconds(),
    )
    processor.set_document_callback(_print_progress)

    with ThreadPoolExecutor(max_workers=1) as executor:
        future = processor.start(job, executor)
        try:
            result = future.result()
        except KeyboardInterrupt:
            job.request_stop()
            print("\n⏹  Stopping after the current resume...")
            result = future.result()

    print(f"\n{job.status_message}: {result.completed} completed, {result.errors} errors")
    if result.cancelled:
        pending = len(job.documents_by_status(DocumentStatus.PENDING))
        print(f"   {pending} resumes left pending")

    if args.json:
        _print_json_report(job, result)
    else:
        _print_ranking(job, args.top, args.details)

    if (args.output or args.export) and job.completed():
        exporter = ResultsExporter(output_dir=config.get_output_dir())
        export_format = args.format or config.get_export_format()
        path = exporter.export(job, filepath=args.output, format=export_format)
        print(f"\n💾 Exported results to {path}")


def _print_progress(document: Document):
    if document.status == DocumentStatus.COMPLETED:
        print(f"   ✅ {document.name}: {document.score}%")
    else:
        print(f"   ❌ {document.name}: {document.error}")


def _print_json_report(job: BatchJob, result: BatchRunResult):
    report = {
        "result": result.to_dict(),
        "summary": job.summary(),
        "documents": [doc.to_dict() for doc in job.ranked()],
    }
    print(json.dumps(report, indent=2))


def _print_ranking(job: BatchJob, top: int, details: bool):
    ranked = [doc for doc in job.ranked() if doc.status == DocumentStatus.COMPLETED]
    if not ranked:
        return

    print(f"\n📊 Top {min(top, len(ranked))} Candidates:\n")
    print("-" * 80)

    for i, doc in enumerate(ranked[:top], 1):
        analysis = doc.analysis
        print(f"\n{i}. {doc.contact.name or doc.name} ({doc.name})")
        if doc.contact.email or doc.contact.phone:
            print(f"   {doc.contact.email or '-'} | {doc.contact.phone or '-'}")
        print(f"   📈 Overall: {analysis.overall_score}% - {analysis.recommendation}")
        print(
            f"   Skills {analysis.skills_match} | Experience {analysis.experience_match} "
            f"({analysis.experience_years}y) | Education {analysis.education_match} "
            f"({analysis.education_level.value}) | Keywords {analysis.keyword_match}"
        )
        if details:
            if analysis.detected_skills:
                print(f"   Skills: {', '.join(analysis.detected_skills)}")
            for strength in analysis.strengths:
                print(f"   + {strength}")
            for weakness in analysis.weaknesses:
                print(f"   - {weakness}")


def cmd_config(args, config: Config):
    """Execute config command."""
    if args.init:
        config = Config.create_default_config(args.config)
        print(f"✅ Created config at: {config.config_path}")

    elif args.show:
        print("\n📋 Current Configuration\n")
        config.print_config()

    elif args.set:
        key, value = args.set
        # Try to parse as JSON for numbers and complex values
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            pass

        if key.startswith("weights."):
            config.set_weight(key.split(".", 1)[1], value)
        else:
            config.set(key, value)
        config.save()
        print(f"✅ Set {key} = {value}")

    else:
        print("Use --show, --set, or --init")


if __name__ == "__main__":
    main()
