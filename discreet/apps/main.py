import sys
import argparse


def identify_app(argv):

    parser = argparse.ArgumentParser(
        prog='discreet',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        description="Main entry point for discreet apps.")

    parser.add_argument(
        "appname",
        choices={'mi', 'entropy'},
        help="Name of the application. Arguments after it are passed to "
             "the app (try `discreet mi --help`).")

    # everything after the app name belongs to the app
    args = parser.parse_args(argv[1:2])

    if args.appname == 'mi':
        from discreet.apps.mi_matrix import main
    elif args.appname == 'entropy':
        from discreet.apps.entropies import main

    args.main = main
    args.appargs = [args.appname] + list(argv[2:])

    return args


def main(argv=None):

    if argv is None:
        argv = sys.argv

    args = identify_app(argv)

    try:
        args.main(args.appargs)
    except Exception:
        message = ("An unexpected error has occurred; please consider filing "
                   "an issue with the traceback below.")
        print(message, file=sys.stderr)
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
