"""CLI command computing length-limited code lengths.

Reads symbol frequencies from the command line, a JSON file or a text file,
runs package-merge under the requested length limit, and prints a table or a
JSON document. ``--compare`` adds the unbounded Huffman baseline.

Examples
--------
  packmerge lengths --max-len 5 1 32 16 4 8 2 1
  packmerge lengths --json freqs.json --format json
  packmerge lengths --text book.txt --max-len 12 --compare --output out.json
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
import json

import click

from packmerge.analysis import expected_length, verify_code_lengths
from packmerge.config import Config
from packmerge.errors import PackageMergeError
from packmerge.huffman import huffman_code_lengths
from packmerge.engine import package_merge
from packmerge.utils import count_characters, ensure_dir, load_frequencies


def _collect_frequencies(
    values: tuple[float, ...],
    json_file: Path | None,
    text_file: Path | None,
) -> tuple[list[str], list[float]]:
    given = sum(1 for src in (bool(values), json_file is not None, text_file is not None) if src)
    if given != 1:
        raise click.UsageError("Give frequencies as arguments, or exactly one of --json/--text.")
    if json_file is not None:
        try:
            return load_frequencies(json_file)
        except (OSError, ValueError) as e:
            raise click.ClickException(f"Cannot read frequencies: {e}")
    if text_file is not None:
        try:
            text = text_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise click.ClickException(f"Cannot read text: {e}")
        return count_characters(text)
    return [str(i) for i in range(len(values))], list(values)


@click.command(name="lengths")
@click.argument("values", nargs=-1, type=float)
@click.option(
    "max_len",
    "--max-len",
    type=int,
    default=Config.DEFAULT_MAX_LEN,
    show_default=True,
    help="Maximum code-word length in bits",
)
@click.option(
    "json_file",
    "--json",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON list of frequencies or object mapping symbol -> frequency",
)
@click.option(
    "text_file",
    "--text",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Text file whose character counts are used as frequencies",
)
@click.option(
    "output_format",
    "--format",
    type=click.Choice(["table", "json"], case_sensitive=False),
    default="table",
    show_default=True,
    help="Output format",
)
@click.option(
    "compare",
    "--compare",
    is_flag=True,
    help="Also report unbounded Huffman code lengths",
)
@click.option(
    "output",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
    help="Write the JSON result to this path",
)
def lengths(
    values: tuple[float, ...],
    max_len: int,
    json_file: Path | None,
    text_file: Path | None,
    output_format: str,
    compare: bool,
    output: Path | None,
) -> None:
    """Compute optimal code lengths no longer than --max-len bits."""

    symbols, freqs = _collect_frequencies(values, json_file, text_file)
    try:
        code_lens = package_merge(freqs, max_len)
    except PackageMergeError as e:
        raise click.ClickException(str(e))

    report = verify_code_lengths(freqs, code_lens, max_len=max_len)
    result: dict[str, Any] = {
        "max_len": max_len,
        "symbols": symbols,
        "frequencies": freqs,
        "lengths": code_lens,
    }
    result.update(report)
    if compare:
        huff = huffman_code_lengths(freqs)
        result["huffman_lengths"] = huff
        result["huffman_expected_length"] = expected_length(freqs, huff)

    if output is not None:
        ensure_dir(output.parent)
        with output.open("w", encoding="utf-8") as f:
            json.dump(result, f, indent=2, ensure_ascii=False)

    if output_format.lower() == "json":
        click.echo(json.dumps(result, indent=2, ensure_ascii=False))
    else:
        _echo_table(result, compare)
    if output is not None:
        click.echo(f"Results saved: {output}")


def _echo_table(result: dict[str, Any], compare: bool) -> None:
    header = f"{'symbol':>10}  {'frequency':>12}  {'length':>6}"
    if compare:
        header += f"  {'huffman':>7}"
    click.echo(header)
    for i, sym in enumerate(result["symbols"]):
        line = f"{sym!r:>10}  {result['frequencies'][i]:>12g}  {result['lengths'][i]:>6d}"
        if compare:
            line += f"  {result['huffman_lengths'][i]:>7d}"
        click.echo(line)
    click.echo(f"Expected length: {result['expected_length']:.4f} bits/symbol")
    click.echo(f"Entropy: {result['entropy']:.4f} bits/symbol")
    click.echo(f"Kraft sum: {result['kraft_sum']:.6f}")
    if compare:
        click.echo(f"Huffman expected length: {result['huffman_expected_length']:.4f} bits/symbol")
