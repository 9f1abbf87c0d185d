"""Compute the matrix of pairwise mutual information between the columns
of a table of discrete observations.

The diagonal of the output holds the entropy of each column. Entropies
are estimated with the naive (plug-in), Chao-Shen or shrinkage
estimator; mutual information can additionally be adjusted for chance
and/or normalized by the smaller marginal entropy.
"""

import sys
import argparse
import logging

from discreet import exception
from discreet.info_theory import mutual_info
from discreet.info_theory.entropy import Method
from discreet.util import load_observations, save_array
from discreet.util.log import timed


logger = logging.getLogger(__name__)


def process_command_line(argv):

    parser = argparse.ArgumentParser(
        prog='mi',
        description=__doc__,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    # INPUT ARGS
    parser.add_argument(
        "--data", required=True,
        help="Table of observations (rows) of discrete variables "
             "(columns). Either a .npy file or delimited text.")
    parser.add_argument(
        "--delimiter", default=None,
        help="Column separator of a text --data file. Default is any "
             "whitespace.")

    # ESTIMATOR ARGS
    parser.add_argument(
        "--method", default=Method.NAIVE.value,
        choices=[m.value for m in Method],
        help="Entropy estimator.")
    parser.add_argument(
        "--adjusted", default=False, action="store_true",
        help="Adjust mutual information for chance using one random "
             "permutation per pair.")
    parser.add_argument(
        "--normalize", default=False, action="store_true",
        help="Normalize mutual information by the smaller of the two "
             "marginal entropies.")
    parser.add_argument(
        "--seed", default=None, type=int,
        help="Random seed for the permutations used by --adjusted.")
    parser.add_argument(
        "--n-procs", default=1, type=int,
        help="Number of processes to spread the calculation over. 0 "
             "uses OMP_NUM_THREADS or the number of cores.")

    # OUTPUT ARGS
    parser.add_argument(
        "--output", required=True,
        help="Path for the mutual information matrix (.npy, or text "
             "for any other extension).")
    parser.add_argument(
        "--verbose", default=False, action="store_true",
        help="Log debugging information.")

    args = parser.parse_args(argv[1:])

    if args.seed is not None and not args.adjusted:
        raise exception.ImproperlyConfigured(
            "--seed only affects --adjusted mutual information; got "
            "--seed=%s without --adjusted." % args.seed)

    if args.n_procs < 0:
        raise exception.ImproperlyConfigured(
            "--n-procs must be non-negative. Got %s." % args.n_procs)

    if args.n_procs == 0:
        args.n_procs = None

    return args


def main(argv=None):

    args = process_command_line(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=('%(asctime)s %(name)-8s %(levelname)-7s %(message)s'),
        datefmt='%m-%d-%Y %H:%M:%S')

    with timed("Loaded observations in %.2f s.", logger.info):
        data = load_observations(args.data, delimiter=args.delimiter)

    logger.info("Computing %s mutual information between %s features "
                "over %s observations.", args.method, data.shape[1],
                data.shape[0])

    mi = mutual_info.mi_matrix(
        data, method=args.method, adjusted=args.adjusted,
        normalize=args.normalize, random_state=args.seed,
        n_procs=args.n_procs)

    save_array(args.output, mi)
    logger.info("Wrote mutual information matrix to %s.", args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
