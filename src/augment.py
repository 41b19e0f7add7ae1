import argparse
import os
import sys

from .constants import SUPPORTED_KEYS
from .resolver import convert, render_chord_span, render_plain


def _key_filename(key):
    return key.replace("#", "sharp")


def transpose_chart_all_keys(chart_path, output_dir, plain=True, keys=SUPPORTED_KEYS):
    """
    Converts a Nashville chart into every supported key and saves one file per key.
    Returns the list of written paths.
    """
    filename = os.path.basename(chart_path)
    base_name, _ = os.path.splitext(filename)
    render = render_plain if plain else render_chord_span
    ext = ".txt" if plain else ".html"

    try:
        with open(chart_path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        print(f"Error reading {chart_path}: {e}", file=sys.stderr)
        return []

    written = []
    for key in keys:
        output_path = os.path.join(output_dir, f"{base_name}_{_key_filename(key)}{ext}")
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(convert(text, key, render))
            print(f"Saved {output_path}")
            written.append(output_path)
        except OSError as e:
            print(f"Error saving key {key}: {e}", file=sys.stderr)
    return written


def main():
    parser = argparse.ArgumentParser(description='Write a Nashville chart out in every supported key.')
    parser.add_argument('file', type=str, help='Path to the chart text file')
    parser.add_argument('output_dir', type=str, help='Directory to save converted charts')
    parser.add_argument('--html', action='store_true', help='Wrap chords in <span class="chord"> markup')
    args = parser.parse_args()

    if not os.path.exists(args.output_dir):
        os.makedirs(args.output_dir)

    written = transpose_chart_all_keys(args.file, args.output_dir, plain=not args.html)
    if not written:
        sys.exit(1)

if __name__ == "__main__":
    main()
