import click
import importlib.metadata
import logging
import os
import sys
import yaml
from pathlib import Path

from orderedmap.cli.bench_commands import bench
from orderedmap.config import BenchConfig


def default_bench_config_path():
    default = Path.home() / ".config" / "orderedmap" / "bench.yaml"
    return os.environ.get("ORDEREDMAP_BENCH_CONFIG", default)


@click.group()
@click.option(
    "--config",
    help="Path to benchmark configuration file",
    type=click.Path(exists=False, readable=True),
    show_default=True,
    default=default_bench_config_path,
)
@click.option(
    "--log-level",
    help="Logging level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.pass_context
def cli(ctx, config, log_level):
    logging.basicConfig(level=log_level.upper())
    if ctx.invoked_subcommand == "version":
        return
    try:
        with open(config) as f:
            ctx.obj = {"config": BenchConfig.from_yaml(f)}
    except FileNotFoundError:
        ctx.obj = {"config": BenchConfig()}
        print(f"Warning: Configuration file not found {config}", file=sys.stderr)
    except (ValueError, yaml.YAMLError) as e:
        click.echo(f"Error: Invalid configuration file {config}: {e}", err=True)
        sys.exit(1)


@cli.command()
def version():
    print(f"{importlib.metadata.version('orderedmap')}")


cli.add_command(bench)


def main():
    cli()


if __name__ == "__main__":
    main()
