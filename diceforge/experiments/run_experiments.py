# diceforge/experiments/run_experiments.py
# Automate uniformity experiments: for each generator and range size, draw
# samples with next_in_range and run a chi-square goodness-of-fit test.
# Use --oracle to draw raw words from a running oracle instead of locally.

import argparse
import csv
import os
import time

import numpy as np
from scipy.stats import chisquare

from ..client import OracleClient, RemoteGenerator
from ..distributions import UniformDiscrete
from ..generators import GENERATORS, make_generator

FIELDS = ['generator', 'range_size', 'trial', 'samples', 'chi2', 'p_value', 'time_s']


def uniformity_test(rng, range_size, samples):
    """Chi-square statistic and p-value of next_in_range(0, range_size - 1) against uniform."""
    dist = UniformDiscrete(0, range_size - 1)
    draws = np.fromiter((rng.next_in_range(0, range_size - 1) for _ in range(samples)),
                        dtype=np.int64, count=samples)
    observed = np.bincount(draws, minlength=range_size)
    expected = np.array([dist.pmf(k) for k in range(range_size)]) * samples
    stat, p = chisquare(observed, expected)
    return float(stat), float(p)


def run_single(rng, seed, range_size, samples):
    rng.reset_seed(seed)
    t0 = time.time()
    stat, p = uniformity_test(rng, range_size, samples)
    return stat, p, time.time() - t0


def ensure_results_dir(path):
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)


def run_all(generators, range_sizes, trials, samples, out, seed=1, oracle=None):
    ensure_results_dir(out)
    with open(out, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(FIELDS)
        if oracle is not None:
            # the oracle serves one generator; label rows with its name
            client = OracleClient(oracle)
            sources = [(client.info()['generator'], RemoteGenerator(client))]
        else:
            sources = [(name, make_generator(name, seed)) for name in generators]
        for name, rng in sources:
            for range_size in range_sizes:
                for trial in range(trials):
                    print(f"Running generator={name}, range_size={range_size}, trial={trial}")
                    stat, p, elapsed = run_single(rng, seed + trial, range_size, samples)
                    writer.writerow([name, range_size, trial, samples, f"{stat:.4f}", f"{p:.6f}", f"{elapsed:.3f}"])
                    f.flush()
    return out


def main(argv=None):
    parser = argparse.ArgumentParser()
    parser.add_argument('--generators', type=str, default=','.join(GENERATORS), help='comma list')
    parser.add_argument('--range_sizes', type=str, default='2,6,10,37', help='comma list')
    parser.add_argument('--trials', type=int, default=5, help='repeats per combo')
    parser.add_argument('--samples', type=int, default=10000, help='draws per trial')
    parser.add_argument('--seed', type=int, default=1, help='base seed, trial i uses seed + i')
    parser.add_argument('--oracle', type=str, default=None, help='oracle base url (draw remotely)')
    parser.add_argument('--out', type=str, default=None, help='CSV path')
    args = parser.parse_args(argv)

    generators = [x for x in args.generators.split(',') if x]
    range_sizes = [int(x) for x in args.range_sizes.split(',')]
    out = args.out or os.path.join('results', f'experiments_{int(time.time())}.csv')
    run_all(generators, range_sizes, args.trials, args.samples, out, seed=args.seed, oracle=args.oracle)
    print("Experiments complete. CSV saved at:", out)


if __name__ == '__main__':
    main()
