#!/usr/bin/env python3
"""
Run Conway's Game of Life on a Life 1.06 board and print the survivors.
"""
import sys
import argparse
from sparse_life.gol_simulator import run
from sparse_life.metrics import classify
from sparse_life.life106 import (FILE_HEADER, HeaderError, parse_life106,
                                 format_life106, write_life106, load_npy, save_npy)

DEFAULT_GENERATIONS = 10


def non_negative_int(value):
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return n


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Simulate Game of Life generations on an unbounded board')
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--input', type=str, default=None, help='Life 1.06 input file (default: stdin)')
    parser.add_argument('--output', type=str, default=None, help='output file (default: stdout)')
    parser.add_argument('--generations', type=non_negative_int, default=DEFAULT_GENERATIONS,
                        help='number of generations to simulate')
    parser.add_argument('--header', type=str, default=FILE_HEADER, help='header token of input and output')
    parser.add_argument('--no_header', action='store_true',
                        help='do not require the input header and omit it from output')
    parser.add_argument('--no_sort', action='store_true', help='emit cells unsorted')
    source.add_argument('--input_npy', type=str, default=None,
                        help='load the initial board from a 2D .npy array instead of Life 1.06 text')
    parser.add_argument('--save_npy', type=str, default=None, help='also save the final board as a .npy array')
    parser.add_argument('--classify', action='store_true', help='report the pattern category of the final board')
    parser.add_argument('--print_every', type=non_negative_int, default=0, help='print progress every N generations (0 disables)')
    return parser.parse_args(argv)


def load_board(args):
    if args.input_npy:
        return load_npy(args.input_npy)
    require_header = not args.no_header
    if args.input:
        with open(args.input, 'r') as f:
            return parse_life106(f, header=args.header, require_header=require_header)
    if sys.stdin.isatty():
        print("Game of Life", file=sys.stderr)
        print("Enter starting board in the Life 1.06 format...", file=sys.stderr)
    return parse_life106(sys.stdin, header=args.header, require_header=require_header)


def main(argv=None):
    args = parse_args(argv)
    try:
        board = load_board(args)
    except HeaderError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1

    board = run(board, args.generations, print_every=args.print_every)

    out_header = None if args.no_header else args.header
    if args.output:
        write_life106(board, args.output, header=out_header, sort=not args.no_sort)
        print(f"Saved {len(board)} live cells after {args.generations} generations to {args.output}",
              file=sys.stderr)
    else:
        print(f"Result of {args.generations} generations:")
        for line in format_life106(board, header=out_header, sort=not args.no_sort):
            print(line)

    if args.save_npy:
        origin = save_npy(board, args.save_npy)
        print(f"Saved array to {args.save_npy} (origin {origin[0]} {origin[1]})", file=sys.stderr)
    if args.classify:
        print(f"Category: {classify(board)}", file=sys.stderr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
