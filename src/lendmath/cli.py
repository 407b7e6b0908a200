import click
import tomlkit
from pydantic import TypeAdapter

from lendmath.config import settings
from lendmath.constants import SECONDS_PER_YEAR
from lendmath.exceptions import LendMathError
from lendmath.fixed_point.ray_math import RAY
from lendmath.fixed_point.scaled_decimal import ScaledDecimal
from lendmath.fixed_point.types import Ray
from lendmath.interest import (
    binomial_approximated_ray_pow,
    calculate_compounded_interest,
    calculate_compounded_rate,
)
from lendmath.logging import set_log_level


def _parse_ray(raw: str, param_hint: str) -> Ray:
    try:
        return Ray(raw, field=param_hint)
    except LendMathError as exc:
        raise click.BadParameter(str(exc.message), param_hint=param_hint) from None


def _format_percentage(rate: ScaledDecimal) -> str:
    percentage = rate.mul(100).rescale(settings.display.apy_decimals)
    return f"{percentage}%"


@click.group()
@click.version_option(package_name="lendmath")
def cli() -> None:
    set_log_level(settings.logging.level)


@cli.group()
def config() -> None:
    """
    Configuration commands
    """


@config.command("show")
@click.option(
    "--json",
    "output_format",
    flag_value="json",
    type=str,
    help="Show configuration in JSON format",
)
@click.option(
    "--toml",
    "output_format",
    flag_value="toml",
    type=str,
    help="Show configuration in TOML format (default)",
    default=True,
)
def config_show(output_format: str) -> None:
    """
    Display the current configuration in JSON or TOML (default) format.
    """

    match output_format:
        case "json":
            click.echo(
                TypeAdapter(dict).dump_json(
                    settings.model_dump(),
                    indent=2,
                ),
            )
        case "toml":
            click.echo(
                tomlkit.dumps(
                    settings.model_dump(),
                ),
            )
        case _:
            ...


@cli.command("apy")
@click.argument("rate")
def apy(rate: str) -> None:
    """
    Compound a yearly RATE (raw ray integer) per second over one year.
    """

    compounded = calculate_compounded_rate(_parse_ray(rate, "RATE"), SECONDS_PER_YEAR)
    click.echo(f"ray: {compounded.value}")
    click.echo(f"apy: {_format_percentage(compounded)}")


@cli.command("compound")
@click.argument("rate")
@click.argument("seconds", type=click.IntRange(min=0))
@click.option(
    "--binomial",
    is_flag=True,
    help="Use the binomial approximation applied by the pool contract to variable debt",
)
def compound(rate: str, seconds: int, *, binomial: bool) -> None:
    """
    Compound a yearly RATE (raw ray integer) per second over SECONDS.
    """

    parsed_rate = _parse_ray(rate, "RATE")
    if binomial:
        compounded = binomial_approximated_ray_pow(
            parsed_rate.scale_div(SECONDS_PER_YEAR),
            seconds,
        ).sub(RAY)
    else:
        compounded = calculate_compounded_rate(parsed_rate, seconds)

    click.echo(f"ray: {compounded.value}")
    click.echo(f"rate: {_format_percentage(compounded)}")


@cli.command("interest")
@click.argument("rate")
@click.argument("last_update", type=int)
@click.option("--now", "current_timestamp", type=int, help="Current timestamp (default: now)")
def interest(rate: str, last_update: int, current_timestamp: int | None) -> None:
    """
    Show the interest factor accrued by a yearly RATE (raw ray integer) since LAST_UPDATE.
    """

    try:
        accrued = calculate_compounded_interest(
            _parse_ray(rate, "RATE"),
            last_update,
            current_timestamp,
        )
    except LendMathError as exc:
        raise click.BadParameter(str(exc.message), param_hint="LAST_UPDATE") from None

    click.echo(f"ray: {accrued.value}")
    click.echo(f"factor: {accrued}")
