"""
Recommender - Main entry point.

Usage:
    talenttrek extract "Looking for a React and Node.js developer"
    talenttrek post-job job.yaml --posted-by hr@example.com
    talenttrek job <job_id>
    talenttrek profile <user_id> resume.txt
    talenttrek recommend <user_id>
    talenttrek apply <user_id> <job_id>
"""

import asyncio
import json
import sys
from pathlib import Path

import click
import yaml
from loguru import logger

from shared.config import get_settings
from shared.database import Database
from shared.errors import TalentTrekError
from skills import extract_skills, load_vocabulary, score

from . import service


def setup_logging():
    """Configure loguru logging."""
    settings = get_settings()
    logger.remove()

    if settings.log_format == "json":
        logger.add(
            sys.stderr,
            format="{message}",
            level=settings.log_level,
            serialize=True,
        )
    else:
        logger.add(
            sys.stderr,
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
                "<level>{message}</level>"
            ),
            level=settings.log_level,
        )


def _split_skills(value: str) -> list[str]:
    return [s.strip() for s in value.split(",") if s.strip()]


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


async def _with_database(operation):
    """Run `operation(db)` against a fresh connection."""
    db = Database()
    await db.connect()
    try:
        return await operation(db)
    finally:
        await db.disconnect()


def _run(operation):
    try:
        return asyncio.run(_with_database(operation))
    except TalentTrekError as e:
        raise click.ClickException(str(e))


@click.group()
@click.pass_context
def main(ctx: click.Context):
    """TalentTrek - skill based job matching."""
    setup_logging()
    settings = get_settings()
    ctx.obj = load_vocabulary(settings.skills_vocabulary_path)


@main.command()
@click.argument("text")
@click.pass_obj
def extract(vocabulary, text: str):
    """Print the skills found in TEXT."""
    _echo_json(extract_skills(text, vocabulary))


@main.command("score")
@click.option("--candidate", "-c", required=True, help="Comma-separated candidate skills")
@click.option("--job", "-j", required=True, help="Comma-separated job skills")
def score_command(candidate: str, job: str):
    """Score two comma-separated skill lists against each other."""
    value = score(_split_skills(candidate), _split_skills(job))
    click.echo(f"{value:.4f}")


@main.command("post-job")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--posted-by", "-p", default=None, help="Poster email")
@click.pass_obj
def post_job(vocabulary, path: Path, posted_by):
    """Post the job described in a YAML file."""
    with open(path) as f:
        job_data = yaml.safe_load(f) or {}

    job = _run(lambda db: service.post_job(db, job_data, posted_by, vocabulary))
    _echo_json(job.model_dump(mode="json"))


@main.command()
@click.argument("user_id")
@click.argument("resume", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def profile(vocabulary, user_id: str, resume: Path):
    """Update USER_ID's skill profile from a plain-text RESUME."""
    text = resume.read_text(encoding="utf-8", errors="ignore")
    result = _run(
        lambda db: service.update_profile_from_resume(
            db, user_id, text, vocabulary, resume_path=str(resume)
        )
    )
    _echo_json(result.model_dump(mode="json"))


@main.command()
@click.argument("user_id")
def recommend(user_id: str):
    """Recommend jobs for USER_ID."""
    recommendations = _run(lambda db: service.recommend_jobs(db, user_id))
    _echo_json(recommendations.to_dict())


@main.command()
@click.argument("user_id")
@click.argument("job_id")
def apply(user_id: str, job_id: str):
    """Apply USER_ID to JOB_ID."""
    _run(lambda db: service.apply_to_job(db, job_id, user_id))
    click.echo("Application submitted!")


@main.command()
@click.option("--limit", "-l", type=int, default=0, help="Maximum jobs to list (0 = all)")
def jobs(limit: int):
    """List posted jobs, newest first."""
    postings = _run(lambda db: service.list_jobs(db, limit))
    _echo_json([job.model_dump(mode="json") for job in postings])


@main.command()
@click.argument("job_id")
def job(job_id: str):
    """Show the job posting JOB_ID."""
    posting = _run(lambda db: service.get_job(db, job_id))
    _echo_json(posting.model_dump(mode="json"))


@main.command("init-db")
def init_db():
    """Create database indexes."""
    _run(lambda db: db.ensure_indexes())
    click.echo("Indexes created")


if __name__ == "__main__":
    main()
