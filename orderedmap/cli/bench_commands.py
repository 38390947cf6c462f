import dataclasses
import logging
import timeit
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

import click
from tabulate import tabulate

from orderedmap.config import SUPPORTED_OPERATIONS, BenchConfig
from orderedmap.ordered_map import OrderedMap

LOGGER = logging.getLogger(__name__)

DESTRUCTIVE_OPERATIONS = ("put", "remove")


@dataclass
class BenchResult:
    operation: str
    size: int
    best_seconds: float
    per_op_ns: float


def preloaded_map(size: int) -> OrderedMap:
    m = OrderedMap()
    for i in range(size):
        m.put(i, i + 1)
    return m


def _bench_case(op: str, size: int) -> Tuple[Callable, Callable, int]:
    """
    Build the (setup, stmt, ops_per_stmt) triple for one operation.

    timeit only calls setup once per repeat, so operations listed in
    DESTRUCTIVE_OPERATIONS must be timed one loop at a time to start from a
    fresh map on every loop.
    """
    state: Dict[str, OrderedMap] = {}

    def setup():
        state["map"] = OrderedMap() if op == "put" else preloaded_map(size)

    def put():
        m = state["map"]
        for i in range(size):
            m.put(i, i + 1)

    def get():
        m = state["map"]
        for i in range(size):
            m.get(i)

    def remove():
        m = state["map"]
        for i in range(size):
            m.remove(i)

    stmts = {
        "put": (put, size),
        "get": (get, size),
        "remove": (remove, size),
        "keys": (lambda: state["map"].keys(), 1),
        "values": (lambda: state["map"].values(), 1),
        "size": (lambda: state["map"].size(), 1),
    }
    stmt, ops = stmts[op]
    return setup, stmt, ops


def run_benchmarks(config: BenchConfig) -> List[BenchResult]:
    results = []
    for op in config.operations:
        setup, stmt, ops = _bench_case(op, config.size)
        LOGGER.debug(
            "benchmarking %s size=%d repeat=%d number=%d",
            op,
            config.size,
            config.repeat,
            config.number,
        )
        if op in DESTRUCTIVE_OPERATIONS:
            loops = timeit.repeat(
                stmt, setup=setup, repeat=config.repeat * config.number, number=1
            )
            timings = [
                sum(loops[i : i + config.number])
                for i in range(0, len(loops), config.number)
            ]
        else:
            timings = timeit.repeat(
                stmt, setup=setup, repeat=config.repeat, number=config.number
            )
        best = min(timings)
        results.append(
            BenchResult(
                operation=op,
                size=config.size,
                best_seconds=best,
                per_op_ns=best / (config.number * ops) * 1e9,
            )
        )
    return results


def bench_result_into_text_row(result: BenchResult) -> list:
    return [
        result.operation,
        result.size,
        f"{result.best_seconds:.6f}",
        f"{result.per_op_ns:.1f}",
    ]


@click.command()
@click.option("--size", help="Number of keys preloaded in the map", type=int)
@click.option("--repeat", help="Number of timeit repeats, best one is kept", type=int)
@click.option("--number", help="Loops per repeat", type=int)
@click.option(
    "-o",
    "--operation",
    "operations",
    help="Operation to benchmark, can be repeated (default: all)",
    type=click.Choice(SUPPORTED_OPERATIONS),
    multiple=True,
)
@click.pass_context
def bench(ctx, size, repeat, number, operations):
    """Benchmark OrderedMap operations"""
    config: BenchConfig = ctx.obj["config"]
    overrides = {
        k: v
        for k, v in [
            ("size", size),
            ("repeat", repeat),
            ("number", number),
            ("operations", list(operations) or None),
        ]
        if v is not None
    }
    try:
        config = dataclasses.replace(config, **overrides)
    except ValueError as e:
        raise click.BadParameter(str(e))

    results = run_benchmarks(config)

    data = [["Operation", "Size", "Best (s)", "Per op (ns)"]]
    for result in results:
        data.append(bench_result_into_text_row(result))

    table = tabulate(data, headers="firstrow", tablefmt="grid", disable_numparse=True)
    click.echo(table)
