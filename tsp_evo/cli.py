import argparse
import sys
import time
from pathlib import Path
from typing import Sequence

from tsp_evo.data import load_locations
from tsp_evo.evaluation import summarize
from tsp_evo.evolutionary import EvolutionConfig, EvolutionarySearch
from tsp_evo.selection import get_smallest
from tsp_evo.tour import Tour, closed_tour_length


def log(msg: str) -> None:
    ts = time.strftime("%H:%M:%S")
    print(f"[{ts}] {msg}", flush=True)


def print_generation(generation: Sequence[Tour]) -> None:
    for tour in generation:
        print(f"{tour.total_distance}")


def _progress(search: EvolutionarySearch) -> None:
    print(f"\r{search.generation} / {search.cfg.generations}", end="", flush=True)


def config_from_args(args) -> EvolutionConfig:
    return EvolutionConfig(
        population_size=args.population_size,
        num_locations=args.locations,
        x_max=args.x_max,
        y_max=args.y_max,
        num_elites=args.elites,
        children_per_elite=args.children,
        mutation_rate=args.mutation_rate,
        generations=args.generations,
        report_every=args.report_every,
        random_seed=args.seed,
    )


def run(args) -> None:
    cfg = config_from_args(args)
    locations = None
    if args.tsp_file:
        tsp_path = Path(args.tsp_file)
        log(f"loading locations from {tsp_path}")
        locations = load_locations(tsp_path)
    t0 = time.perf_counter()
    search = EvolutionarySearch(cfg, locations=locations)
    origin = args.tsp_file or f"random (x_max={cfg.x_max}, y_max={cfg.y_max})"
    log(f"{len(search.locations)} locations from {origin}, seed={cfg.random_seed}")
    log(
        f"population={cfg.population_size} elites={cfg.num_elites} children={cfg.children_per_elite} "
        f"mutation_rate={cfg.mutation_rate} generations={cfg.generations}"
    )

    print("-----Before Training-----")
    print_generation(get_smallest(search.population, 1))

    best = search.run(callback=_progress)
    print("\r", end="")

    print("-----After Training-----")
    print_generation([best])
    stats = summarize(search.population)
    log(
        f"done in {time.perf_counter() - t0:.2f}s: best={stats.best:.2f} avg={stats.mean:.2f} "
        f"worst={stats.worst:.2f} closed_length={closed_tour_length(best.locations):.2f}"
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Evolutionary TSP search")
    subparsers = parser.add_subparsers(dest="command", required=True)

    defaults = EvolutionConfig()
    run_parser = subparsers.add_parser("run", help="Run one evolutionary search and report the best tour")
    run_parser.add_argument("--population-size", type=int, default=defaults.population_size)
    run_parser.add_argument("--locations", type=int, default=defaults.num_locations)
    run_parser.add_argument("--x-max", type=int, default=defaults.x_max)
    run_parser.add_argument("--y-max", type=int, default=defaults.y_max)
    run_parser.add_argument("--elites", type=int, default=defaults.num_elites)
    run_parser.add_argument("--children", type=int, default=defaults.children_per_elite)
    run_parser.add_argument("--mutation-rate", type=float, default=defaults.mutation_rate)
    run_parser.add_argument("--generations", type=int, default=defaults.generations)
    run_parser.add_argument("--report-every", type=int, default=defaults.report_every)
    run_parser.add_argument("--seed", type=int, default=None)
    run_parser.add_argument("--tsp-file", default=None, help="TSPLIB .tsp file to use instead of random locations")
    run_parser.set_defaults(func=run)

    args = parser.parse_args(argv)
    try:
        args.func(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
