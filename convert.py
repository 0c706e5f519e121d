import argparse
import glob
import logging
import os
import sys

from encoder import Encoder

OUTPUT_SUFFIX = "-16LE.wav"

SKIPPED = "skipped"
CONVERTED = "converted"
FAILED = "failed"


class UsageParser(argparse.ArgumentParser):
    """Argument parser that reports usage mistakes on stdout and exits 1."""

    def error(self, message):
        print(f'Usage: {self.prog} "file_pattern"')
        print(f'Example: {self.prog} "*.wav"')
        sys.exit(1)


def output_path_for(path):
    """
    Returns the converted file's path: everything from the last '.' onwards
    is dropped and `-16LE.wav` appended. Paths without a '.' keep their full
    name as the stem.
    """
    stem, dot, _ = path.rpartition(".")
    if not dot:
        stem = path
    return stem + OUTPUT_SUFFIX


def candidate_files(pattern):
    """
    Yields the regular files matched by a glob pattern, in sorted order.

    The pattern is a single glob: whitespace inside it is part of the
    pattern, so "*.wav *.mp3" only matches names containing that space.
    """
    for path in sorted(glob.glob(pattern)):
        if not os.path.isfile(path):
            continue
        yield path


def convert_file(path, encoder):
    output = output_path_for(path)

    # skip if the output already exists
    if os.path.isfile(output):
        print(f"Skipping {path} - output file already exists")
        return SKIPPED

    print(f"Processing {path} -> {output}")
    if encoder.encode(path, output):
        print(f"Successfully converted {path}")
        return CONVERTED

    print(f"Error converting {path}")
    return FAILED


def convert_all(pattern, encoder):
    """
    Converts every file matching `pattern`, one at a time.

    A failed file is reported and the loop moves on; nothing is retried.
    Returns the list of (path, outcome) pairs in processing order.
    """
    results = []
    for path in candidate_files(pattern):
        results.append((path, convert_file(path, encoder)))
    return results


def main(argv=None):
    parser = UsageParser(
        description="Converts audio files matching a glob pattern to 16-bit little-endian PCM WAV.",
    )
    parser.add_argument("pattern", help='Glob pattern of files to convert, e.g. "*.wav".')
    parser.add_argument("-V", "--verbose", action="store_true", help="Verbose output.")

    if argv is None:
        argv = sys.argv[1:]
    # a lone argument is always the pattern, even if it looks like an option
    if len(argv) == 1:
        argv = ["--", *argv]

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    convert_all(args.pattern, Encoder())


if __name__ == "__main__":
    main()
