"""Dump the TES4 header of a plugin file.

Usage:
    python -m scripts.dump_header PLUGIN [--strict] [--keyword-offset N] [-v]
"""

import argparse
import logging
import sys
from pathlib import Path

from plugin_decoder.errors import DecodeError
from plugin_decoder.models.header import HeaderRecord
from plugin_decoder.models.keyword import KeywordRecord
from plugin_decoder.parser.cursor import Cursor
from plugin_decoder.parser.header_parser import decode_header
from plugin_decoder.parser.keyword_parser import decode_keyword
from plugin_decoder.parser.resolver import OptionalPolicy


def format_header(record: HeaderRecord, end_offset: int) -> list[str]:
    flags = [
        name
        for name, is_set in (
            ("master", record.is_master),
            ("localized", record.is_localized),
            ("light", record.is_light),
        )
        if is_set
    ]
    stamp = record.version_stamp
    lines = [
        f"TES4 size={record.size} flags={', '.join(flags) or 'none'}",
        f"  version stamp: day={stamp.day} month={stamp.month} "
        f"last_user={stamp.last_user} current_user={stamp.current_user}",
        f"  form version: {record.version}",
        f"  HEDR: version={record.hedr.version:.2f} "
        f"records={record.hedr.num_records} "
        f"next_object_id=0x{record.hedr.next_object_id:08X}",
    ]
    if record.author is not None:
        lines.append(f"  author: {record.author}")
    if record.description is not None:
        lines.append(f"  description: {record.description}")
    for name in record.master_names:
        lines.append(f"  master: {name}")
    if record.overrides is not None:
        lines.append(f"  overrides: {len(record.overrides)} form id(s)")
    if record.internal_version is not None:
        lines.append(f"  internal version: {record.internal_version}")
    if record.content_changes is not None:
        lines.append(f"  content changes: {record.content_changes}")
    lines.append(f"  header ends at offset {end_offset}")
    return lines


def format_keyword(record: KeywordRecord) -> str:
    return (
        f"KYWD 0x{record.header.form_id:08X} {record.editor_id} "
        f"color={record.color.as_hex()}"
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump a plugin's TES4 header")
    parser.add_argument("plugin", type=Path, help="Path to .esm/.esp/.esl")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on a corrupt optional subrecord instead of treating it as absent",
    )
    parser.add_argument(
        "--keyword-offset",
        type=int,
        default=None,
        help="Also decode one KYWD record starting at this byte offset",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    data = args.plugin.read_bytes()
    if args.keyword_offset is not None and not 0 <= args.keyword_offset <= len(data):
        parser.error(f"--keyword-offset must be within 0..{len(data)}")
    policy = OptionalPolicy.STRICT if args.strict else OptionalPolicy.LENIENT
    try:
        record, rest = decode_header(data, policy=policy)
        print("\n".join(format_header(record, rest.offset)))
        if args.keyword_offset is not None:
            keyword, _ = decode_keyword(Cursor(data, args.keyword_offset))
            print(format_keyword(keyword))
    except DecodeError as exc:
        print(f"{args.plugin}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
