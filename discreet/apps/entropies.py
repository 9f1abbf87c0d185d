"""Estimate the Shannon entropy (in nats) of each column of a table of
discrete observations.
"""

import sys
import argparse
import logging

from discreet.info_theory.entropy import Method, estimate_entropy
from discreet.util import load_observations, save_array


logger = logging.getLogger(__name__)


def process_command_line(argv):

    parser = argparse.ArgumentParser(
        prog='entropy',
        description=__doc__,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)

    parser.add_argument(
        "--data", required=True,
        help="Table of observations (rows) of discrete variables "
             "(columns). Either a .npy file or delimited text.")
    parser.add_argument(
        "--delimiter", default=None,
        help="Column separator of a text --data file. Default is any "
             "whitespace.")
    parser.add_argument(
        "--method", default=Method.NAIVE.value,
        choices=[m.value for m in Method],
        help="Entropy estimator.")
    parser.add_argument(
        "--output", default=None,
        help="Path to write entropies to. If not given, they are "
             "printed, one per line.")
    parser.add_argument(
        "--verbose", default=False, action="store_true",
        help="Log debugging information.")

    return parser.parse_args(argv[1:])


def main(argv=None):

    args = process_command_line(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=('%(asctime)s %(name)-8s %(levelname)-7s %(message)s'),
        datefmt='%m-%d-%Y %H:%M:%S')

    data = load_observations(args.data, delimiter=args.delimiter)

    entropies = [estimate_entropy(data[:, i], args.method)
                 for i in range(data.shape[1])]

    if args.output is None:
        for h in entropies:
            print('%.10g' % h)
    else:
        save_array(args.output, entropies)
        logger.info("Wrote %s entropies to %s.", len(entropies), args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
