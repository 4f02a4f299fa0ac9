"""
Terminal trigger — runs one generation cycle against the generator service.

Start with:
    python -m austin_weird.trigger.main --url http://localhost:5000
"""
import argparse
import json
import logging
import sys

from austin_weird import config
from austin_weird.trigger.client import GenerateTrigger, TriggerState


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Generate Austin Weirdness.')
    parser.add_argument('--url', default=config.GENERATOR_URL,
                        help='Generator service base URL (default: %(default)s)')
    parser.add_argument('--json', action='store_true',
                        help='Print the raw JSON result instead of the formatted view')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL)

    trigger = GenerateTrigger(args.url)
    print('Generating Austin Weirdness...', flush=True)
    state = trigger.generate()

    if args.json and state == TriggerState.RESULT:
        print(json.dumps(trigger.content, indent=2, ensure_ascii=False))
    else:
        print(trigger.render())

    return 0 if state == TriggerState.RESULT else 1


if __name__ == '__main__':
    sys.exit(main())
