"""
Command-line interface for tiny-qed.

Usage:
    tiny-qed run --shots 1000
    tiny-qed run --qubits 3 --clbits 3 --gates "h:0,cx:0:1,cx:1:2" --seed 7
    tiny-qed draw --qubits 2 --gates "h:0,cx:0:1,measure:1:0"
    tiny-qed info
"""
import argparse
import logging

from ..circuit import Circuit
from ..gates import GATE_REGISTRY

BELL = "h:0,cx:0:1,measure:0:0,measure:1:1"


def parse_gates(text):
    """
    Parse a gate list like "h:0,cx:0:1,measure:1:0".

    Returns a list of (name, operands) tuples.
    """
    ops = []
    for item in text.split(','):
        item = item.strip()
        if not item:
            continue
        name, *operands = item.split(':')
        name = name.lower()
        if name not in GATE_REGISTRY:
            raise ValueError(f"Unknown gate '{name}' in '{item}'")
        expected = GATE_REGISTRY[name]['n_qubits'] + (1 if name == 'measure' else 0)
        if len(operands) != expected:
            raise ValueError(f"Gate '{name}' takes {expected} index(es), got '{item}'")
        try:
            ops.append((name, tuple(int(o) for o in operands)))
        except ValueError:
            raise ValueError(f"Non-integer index in '{item}'") from None
    return ops


def build_circuit(args):
    """Build a circuit from --qubits/--clbits/--gates."""
    circuit = Circuit(args.qubits, args.clbits)
    for name, operands in parse_gates(args.gates):
        circuit = getattr(circuit, name)(*operands)
    return circuit


def cmd_run(args):
    """Simulate a circuit and print the counts."""
    from ..backends.statevector import StatevectorBackend
    from ..visualization import plot_counts, show_counts

    circuit = build_circuit(args)
    print(f"Running {circuit!r} with {args.shots} shots...")
    result = StatevectorBackend(seed=args.seed).run(circuit, shots=args.shots)
    print(show_counts(result.counts))

    if args.plot:
        plot_counts(result.counts, filename=args.plot)
        print(f"Saved plot to {args.plot}")


def cmd_draw(args):
    """Print the circuit diagram."""
    print(build_circuit(args).draw())


def cmd_info(args):
    """Show tiny-qed information."""
    from .. import __version__

    print(f"""
tiny-qed v{__version__}
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

Exact statevector simulation of small quantum circuits.

Gates: {', '.join(sorted(GATE_REGISTRY))}

Usage:
  tiny-qed run --shots 1000
  tiny-qed run --qubits 3 --clbits 3 --gates "h:0,cx:0:1,cx:1:2"
  tiny-qed draw --qubits 2 --gates "h:0,cx:0:1"
""")


def _add_circuit_args(parser):
    parser.add_argument('--qubits', type=int, default=2, help='Number of qubits')
    parser.add_argument('--clbits', type=int, default=2, help='Number of classical bits')
    parser.add_argument('--gates', default=BELL,
                        help='Gates as "h:0,cx:0:1,measure:0:0" (default: Bell circuit)')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='tiny-qed',
        description='Exact statevector quantum circuit simulator'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Run command
    run_parser = subparsers.add_parser('run', help='Simulate a circuit')
    _add_circuit_args(run_parser)
    run_parser.add_argument('--shots', type=int, default=1024, help='Number of shots')
    run_parser.add_argument('--seed', type=int, help='Random seed')
    run_parser.add_argument('--plot', metavar='FILE', help='Save a bar chart to FILE')
    run_parser.set_defaults(func=cmd_run)

    # Draw command
    draw_parser = subparsers.add_parser('draw', help='Draw a circuit')
    _add_circuit_args(draw_parser)
    draw_parser.set_defaults(func=cmd_draw)

    # Info command
    info_parser = subparsers.add_parser('info', help='Show tiny-qed info')
    info_parser.set_defaults(func=cmd_info)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.command is None:
        parser.print_help()
        return

    try:
        args.func(args)
    except (ValueError, IndexError, KeyError) as exc:
        parser.error(str(exc))


if __name__ == '__main__':
    main()
