"""
Guardian CLI
=============

Click-based command-line interface for the Guardian password strength
meter and secret generator.

Usage::

    python -m guardian password --length 24 --no-symbols
    python -m guardian passphrase --words 6 --separator . --assess
    python -m guardian check
    python -m guardian request generatePassword -p length=20 -p symbols=false
    python -m guardian audit --samples 20000

Exit status is 0 on success, 1 for configuration or usage problems
and for failed uniformity audits, and 2 when the operating system's
random source is unavailable.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import click

from shared.config import GuardianConfig
from shared.console import GuardianConsole
from shared.models import ScanResult

from guardian import __version__
from guardian.core.engine import GuardianEngine
from guardian.core.models import GeneratedSecret, StrengthAssessment
from guardian.generators.random_source import EntropySourceError
from guardian.output.console import GuardianConsoleOutput
from guardian.output.report import GuardianReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="guardian")
@click.option(
    "--config", "-c",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a Guardian configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """Guardian -- Password Strength Meter & Secure Secret Generator.

    Generate passwords and passphrases from the operating system's
    secure random source and estimate the strength of any secret.
    """
    ctx.ensure_object(dict)
    console = GuardianConsole(quiet=quiet)

    try:
        guardian_config = GuardianConfig.load(config) if config else GuardianConfig()
    except FileNotFoundError as exc:
        console.error(str(exc))
        ctx.exit(1)

    if quiet and not guardian_config.global_settings.debug:
        guardian_config.global_settings.log_level = "WARNING"

    ctx.obj["config"] = guardian_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["console"] = console
    ctx.obj["engine"] = GuardianEngine(guardian_config)
    ctx.obj["display"] = GuardianConsoleOutput(console)
    ctx.obj["reporter"] = GuardianReportGenerator(version=__version__)

    if output == "console":
        console.banner(version=__version__)


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Write *result* as JSON or HTML according to the global options."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: GuardianReportGenerator = ctx.obj["reporter"]
    console: GuardianConsole = ctx.obj["console"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(json.dumps(
                reporter.build_json(result),
                indent=2,
                ensure_ascii=False,
                default=str,
            ))
    elif output_format == "html":
        config: GuardianConfig = ctx.obj["config"]
        path = Path(output_file) if output_file else (
            Path(config.global_settings.output_dir) / "guardian_report.html"
        )
        reporter.generate_html(result, path)
        console.success(f"HTML report saved to: {path}")


def _emit_json(ctx: click.Context, payload: Any) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    output_file = ctx.obj["output_file"]
    if output_file:
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        ctx.obj["console"].success(f"JSON written to: {path}")
    else:
        click.echo(text)


def _entropy_failure(ctx: click.Context, exc: EntropySourceError) -> None:
    ctx.obj["console"].critical(f"Secure random source unavailable: {exc}")
    ctx.exit(2)


def _show_generated(ctx: click.Context, secret: GeneratedSecret, assess: bool) -> None:
    """Display a fresh secret, optionally with its assessment."""
    engine: GuardianEngine = ctx.obj["engine"]
    display: GuardianConsoleOutput = ctx.obj["display"]
    output_format = ctx.obj["output_format"]

    if output_format == "html":
        ctx.obj["console"].error("HTML output is only available for 'check'.")
        ctx.exit(1)

    assessment = engine.assess(secret.value) if assess else None
    tips = engine.advise(secret.value, assessment) if assessment else []

    if output_format == "json":
        payload: dict[str, Any] = {
            "kind": secret.kind.value,
            "value": secret.value,
            "length": secret.length,
        }
        if secret.word_count is not None:
            payload["word_count"] = secret.word_count
        if assessment is not None:
            payload["assessment"] = assessment.model_dump(mode="json")
            payload["advice"] = tips
        _emit_json(ctx, payload)
        return

    display.display_secret(secret)
    if assessment is not None:
        display.display_assessment(assessment)
        display.display_advice(tips)


# ===================================================================== #
#  Generation
# ===================================================================== #

@cli.command()
@click.option("--length", "-l", type=int, default=None,
              help="Password length (clamped to the configured bounds).")
@click.option("--lower/--no-lower", default=True, help="Include lowercase letters.")
@click.option("--upper/--no-upper", default=True, help="Include uppercase letters.")
@click.option("--digits/--no-digits", default=True, help="Include digits.")
@click.option("--symbols/--no-symbols", default=True, help="Include symbols.")
@click.option("--exclude-ambiguous/--include-ambiguous", default=None,
              help="Drop look-alike glyphs such as 0/O and 1/l/I.")
@click.option("--assess", is_flag=True, default=False,
              help="Also run the strength meter on the result.")
@click.pass_context
def password(
    ctx: click.Context,
    length: Optional[int],
    lower: bool,
    upper: bool,
    digits: bool,
    symbols: bool,
    exclude_ambiguous: Optional[bool],
    assess: bool,
) -> None:
    """Generate a random password.

    At least one character from every selected class is guaranteed
    when the length allows it. Deselecting every class falls back to
    lowercase letters.
    """
    engine: GuardianEngine = ctx.obj["engine"]
    settings = ctx.obj["config"].generator

    request = engine.dispatcher.password_request(
        length if length is not None else settings.default_length,
        lower=lower,
        upper=upper,
        digits=digits,
        symbols=symbols,
        exclude_ambiguous=(
            settings.exclude_ambiguous if exclude_ambiguous is None else exclude_ambiguous
        ),
    )
    if length is not None and request.length != length:
        ctx.obj["console"].info(f"Length {length} adjusted to {request.length}.")
    try:
        secret = engine.generate_password(request)
    except EntropySourceError as exc:
        _entropy_failure(ctx, exc)
        return

    _show_generated(ctx, secret, assess)


@cli.command()
@click.option("--words", "-w", type=int, default=None,
              help="Number of words (clamped to the configured bounds).")
@click.option("--separator", "-s", default=None,
              help="Separator between words; only the first character is used.")
@click.option("--assess", is_flag=True, default=False,
              help="Also run the strength meter on the result.")
@click.pass_context
def passphrase(
    ctx: click.Context,
    words: Optional[int],
    separator: Optional[str],
    assess: bool,
) -> None:
    """Generate a random passphrase from the word list."""
    engine: GuardianEngine = ctx.obj["engine"]
    settings = ctx.obj["config"].generator

    request = engine.dispatcher.passphrase_request(
        words if words is not None else settings.default_word_count,
        separator,
    )
    if words is not None and request.word_count != words:
        ctx.obj["console"].info(f"Word count {words} adjusted to {request.word_count}.")
    try:
        secret = engine.generate_passphrase(request)
    except EntropySourceError as exc:
        _entropy_failure(ctx, exc)
        return

    _show_generated(ctx, secret, assess)


# ===================================================================== #
#  Assessment
# ===================================================================== #

@cli.command()
@click.argument("secret", required=False)
@click.pass_context
def check(ctx: click.Context, secret: Optional[str]) -> None:
    """Estimate the strength of SECRET and suggest improvements.

    When SECRET is omitted it is read from a hidden prompt, which keeps
    it out of the shell history.
    """
    if secret is None:
        secret = click.prompt("Secret", hide_input=True, default="", show_default=False)

    engine: GuardianEngine = ctx.obj["engine"]
    display: GuardianConsoleOutput = ctx.obj["display"]

    result = engine.analyze_secret(secret)

    if ctx.obj["output_format"] == "console":
        assessment = StrengthAssessment.model_validate(result.metadata["assessment"])
        display.display_assessment(assessment, secret)
        display.display_advice(result.metadata["advice"])
        ctx.obj["console"].blank()
        ctx.obj["console"].findings_table(result.findings)
    else:
        _handle_output(ctx, result)


# ===================================================================== #
#  Request boundary
# ===================================================================== #

def _parse_params(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    params: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}")
        params[key] = value
    return params


@cli.command()
@click.argument("action")
@click.option("--param", "-p", "params", multiple=True, callback=_parse_params,
              metavar="KEY=VALUE", help="Request field; may be repeated.")
@click.pass_context
def request(ctx: click.Context, action: str, params: dict[str, str]) -> None:
    """Serve one request the way the web endpoint does.

    ACTION is generatePassword or generatePassphrase. Fields are passed
    as strings and resolved with the endpoint's defaults and bounds; the
    JSON response is printed to stdout.
    """
    engine: GuardianEngine = ctx.obj["engine"]
    try:
        response = engine.handle(action, params)
    except EntropySourceError as exc:
        _entropy_failure(ctx, exc)
        return

    click.echo(json.dumps(response.to_payload(), ensure_ascii=False))


# ===================================================================== #
#  Uniformity audit
# ===================================================================== #

@cli.command()
@click.option("--samples", "-n", type=click.IntRange(min=1), default=None,
              help="Samples per test (default from config).")
@click.option("--significance", type=click.FloatRange(0.0, 1.0), default=None,
              help="Rejection threshold for the p-value (default from config).")
@click.option("--shuffle-size", type=click.IntRange(2, 7), default=None,
              help="Length of the list whose permutations are counted.")
@click.pass_context
def audit(
    ctx: click.Context,
    samples: Optional[int],
    significance: Optional[float],
    shuffle_size: Optional[int],
) -> None:
    """Chi-squared uniformity audit of the generators.

    Exits with status 1 when any test rejects uniformity.
    """
    engine: GuardianEngine = ctx.obj["engine"]
    console: GuardianConsole = ctx.obj["console"]

    try:
        with console.status("Sampling generators..."):
            results = engine.audit(samples, significance, shuffle_size)
    except ValueError as exc:
        console.error(str(exc))
        ctx.exit(1)
        return
    except EntropySourceError as exc:
        _entropy_failure(ctx, exc)
        return

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_uniformity(results)
    else:
        _emit_json(ctx, [r.model_dump(mode="json") for r in results])

    rejected = [r.test_name for r in results if not r.passed]
    if rejected:
        ctx.obj["console"].warning(f"Uniformity rejected for: {', '.join(rejected)}")
        ctx.exit(1)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Guardian CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
