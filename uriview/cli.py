import sys
import argparse

from . import env


def main(argv=None):
    from uriview import parse, ParseFailure
    from uriview.pretty import pformat_uri, pformat_failure

    ap = argparse.ArgumentParser(prog='uriview', description='Parse uris into their components')
    ap.add_argument('uris', nargs='+', metavar='URI', help='uri to parse')
    ap.add_argument('--no-color', dest='color', action='store_false', default=env.COLOR,
                    help='do not color the output')
    ap.add_argument('--rest-only', action='store_true', help='only print what is left unparsed')
    args = ap.parse_args(argv)

    status = 0
    for i, text in enumerate(args.uris):
        try:
            rest, uri = parse(text)
        except ParseFailure as e:
            print(pformat_failure(e, color=args.color), file=sys.stderr)
            status = 1
            continue

        if args.rest_only:
            print(rest)
            continue
        if i:
            print()
        print(pformat_uri(uri, rest, color=args.color))

    return status


if __name__ == '__main__':
    sys.exit(main())
