#! /usr/bin/env python3

"""Base62 Converter

Command-line interface for encoding 32-bit unsigned integers as short
Base62 identifiers and decoding them again.  Names may also be hashed
down to 32 bits first, yielding compact generated identifiers.

"""

import argparse
import cityhash
import sys

import base62conv

STATUS_ENCODED = 'ENCODED'
STATUS_DECODED = 'DECODED'
STATUS_HASHED = 'HASHED'

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

class Base62Converter:

    __slots__ = ('decoding', 'hashing', 'prefix', 'size_hint', 'verbose',
                 'values', 'output')

    def __init__(self, output=None):
        # See also .configure() when changing these values:
        self.decoding = False
        self.hashing = False
        self.prefix = ''
        self.size_hint = None   # Let encoder choose its default capacity
        self.verbose = False
        self.values = []
        self.output = output or sys.stdout

    def main(self, argv=None):
        """Convert each configured value, stopping at first failure.
        Returns: process exit status
        """
        self.configure(argv)
        for value in self.values:
            try:
                status, result = self.convert(value)
            except (base62conv.Base62Error, ValueError, TypeError) as error:
                print("error={} input={} reason={}"
                      .format(type(error).__name__, value, error),
                      file=sys.stderr)
                return EXIT_FAILURE
            if self.verbose:
                print("status={} input={} result={}"
                      .format(status, value, result), file=sys.stderr)
            print(result, file=self.output)

        return EXIT_SUCCESS

    def configure(self, argv=None):
        args = self.parse_args(argv)
        # See also .__init__() when changing these values:
        if args.decoding and (args.hashing or args.prefix):
            raise SystemExit("error=usage reason=--decode excludes"
                             " --hash and --prefix")
        self.decoding = args.decoding
        self.hashing = args.hashing
        self.prefix = args.prefix
        self.size_hint = args.size_hint
        self.verbose = args.verbose
        self.values = args.values

    def parse_args(self, argv=None):
        parser = argparse.ArgumentParser(
            description="Base62 converter for 32-bit unsigned integers",
            epilog='Each result is printed on its own line.')
        parser.add_argument('-d', '--decode', dest='decoding',
                            action='store_true', default=self.decoding,
                            help='Decode Base62 representations into integers')
        parser.add_argument('--hash', dest='hashing',
                            action='store_true', default=self.hashing,
                            help='Hash each name with CityHash32'
                            ' and encode the result')
        parser.add_argument('--prefix', dest='prefix',
                            default=self.prefix,
                            help='Text prepended to each encoded result;'
                            ' e.g., "field_"')
        parser.add_argument('-s', '--size-hint', dest='size_hint',
                            type=int, default=self.size_hint,
                            help='Capacity hint for the encoding buffer')
        parser.add_argument('-v', '--verbose', dest='verbose',
                            action='store_true', default=self.verbose,
                            help='Report each conversion on stderr')
        parser.add_argument('values', nargs='+',
                            help='Integers to encode, representations to'
                            ' decode, or names to hash')
        return parser.parse_args(argv)

    def convert(self, value):
        """Convert one command-line VALUE per configured mode.
        Returns: tuple containing status and printable result
        """
        if self.decoding:
            return (STATUS_DECODED, str(base62conv.decode(value)))
        if self.hashing:
            status = STATUS_HASHED
            integer = self.hash_name(value)
        else:
            status = STATUS_ENCODED
            if not (value.isascii() and value.isdigit()):
                raise ValueError("Value must be ASCII decimal digits, not {!r}"
                                 .format(value))
            integer = int(value, 10)
        return (status, base62conv.encode_with_prefix(integer, self.prefix,
                                                      self.size_hint))

    def hash_name(self, name):
        """Reduce NAME to a 32-bit unsigned integer"""
        return cityhash.CityHash32(name) & base62conv.MAX_VALUE

def main():
    sys.exit(Base62Converter().main())

if __name__ == '__main__':
    main()
