"""
Command-line interface for morphological disambiguation.

Reads a lattice file (one word per line, every candidate parse of the word
tab-separated after its surface form, blank line between sentences) and
prints one chosen analysis per word.
"""
import sys
import argparse
import json

from morphdisambig.config import LOG_FILE, ROOT_LIST_PATH
from morphdisambig.errors import DisambiguationError, MissingRootFileError

STRATEGIES = ['hmm', 'root-first', 'rules', 'random']


def build_disambiguator(args):
    """Instantiate (and train, if needed) the disambiguator named by --strategy."""
    if args.strategy == 'rules':
        from morphdisambig.longest_root import RuleEngine
        return RuleEngine(root_list_path=args.root_list)

    if args.strategy == 'random':
        from morphdisambig.dummy import RandomDisambiguator
        return RandomDisambiguator(seed=args.seed)

    from morphdisambig.corpus import DisambiguationCorpus
    if args.strategy == 'hmm':
        from morphdisambig.hmm import ViterbiDisambiguator
        disambiguator = ViterbiDisambiguator()
    else:
        from morphdisambig.root_first import GreedyRootDisambiguator
        disambiguator = GreedyRootDisambiguator()

    if not args.train:
        raise ValueError(f"Strategy '{args.strategy}' needs a training corpus (--train)")
    disambiguator.train(DisambiguationCorpus.from_file(args.train))
    return disambiguator


def cmd_disambiguate(args):
    """Disambiguate every sentence of a lattice file."""
    from morphdisambig.corpus import read_lattices
    from morphdisambig.trace import DisambiguationTrace

    try:
        disambiguator = build_disambiguator(args)
        lattices = read_lattices(args.lattice)
    except MissingRootFileError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        print(f"Provide a root list with --root-list (default: {ROOT_LIST_PATH})", file=sys.stderr)
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.trace and args.strategy != 'rules':
        print("WARNING: --trace is only supported by the rules strategy", file=sys.stderr)

    results = []
    for number, lattice in enumerate(lattices, 1):
        surface_forms = [candidates.surface_form for candidates in lattice]
        try:
            if args.trace and args.strategy == 'rules':
                trace = DisambiguationTrace(sentence=surface_forms)
                try:
                    analyses = disambiguator.disambiguate(lattice, trace=trace)
                finally:
                    print(trace.to_json(), file=sys.stderr)
            else:
                analyses = disambiguator.disambiguate(lattice)
        except DisambiguationError as e:
            print(f"ERROR in sentence {number}: {e}", file=sys.stderr)
            sys.exit(1)
        results.append(analyses)

    if args.format == 'json':
        output = [
            [{"surface_form": a.surface_form, "analysis": a.transition_list} for a in analyses]
            for analyses in results
        ]
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        for i, analyses in enumerate(results):
            if i > 0:
                print()
            for analysis in analyses:
                print(f"{analysis.surface_form}\t{analysis.transition_list}")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='morphdisambig',
        description='Morphological disambiguation of Turkish parse lattices',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Hand-written rules with a root list
  morphdisambig disambiguate --lattice sentences.txt --strategy rules --root-list rootlist.txt

  # HMM trained on a disambiguated corpus, JSON output
  morphdisambig disambiguate --lattice sentences.txt --strategy hmm --train corpus.txt --format json

  # Follow the rule engine's decisions
  morphdisambig --debug disambiguate --lattice sentences.txt --strategy rules --trace
        """
    )
    parser.add_argument('--debug', action='store_true', help='Verbose logging with file/line information')
    parser.add_argument('--log-file', default=LOG_FILE, help=f'Log file (default: {LOG_FILE})')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # --- disambiguate command ---
    parser_dis = subparsers.add_parser('disambiguate', help='Choose one analysis per word')
    parser_dis.add_argument('--lattice', required=True, help='Lattice file to disambiguate')
    parser_dis.add_argument('--strategy', choices=STRATEGIES, default='rules',
                            help='Disambiguation strategy (default: rules)')
    parser_dis.add_argument('--train', help='Disambiguated corpus (required by hmm and root-first)')
    parser_dis.add_argument('--root-list', default=ROOT_LIST_PATH,
                            help=f'Root list for the rules strategy (default: {ROOT_LIST_PATH})')
    parser_dis.add_argument('--seed', type=int, help='Random seed for the random strategy')
    parser_dis.add_argument('--format', choices=['text', 'json'], default='text',
                            help='Output format (default: text)')
    parser_dis.add_argument('--trace', action='store_true',
                            help='Print a JSON decision trace per sentence to stderr (rules only)')
    parser_dis.set_defaults(func=cmd_disambiguate)

    args = parser.parse_args(argv)

    # If no command specified, show help
    if not args.command:
        parser.print_help()
        sys.exit(1)

    from morphdisambig.logging_config import setup_logging
    setup_logging(log_file=args.log_file, debug=args.debug,
                  run_name=f"{args.command} --strategy {args.strategy}")

    args.func(args)


if __name__ == '__main__':
    main()
