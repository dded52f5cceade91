"""
Example: parse a description.md file and print (or store) the result as JSON.

Usage:
    python3 parsing_demo.py --description examples/description.md
    python3 parsing_demo.py --description examples/description.md --output parsed.json
    python3 parsing_demo.py --description path/to/description.md --work-id my-work --storage-root ./data
"""

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path

from portfolio.parsing import LocalWorkStorage, MarkdownParsingEngine, ParserConfig, StoragePaths


def setup_logging(log_file: Path = None, verbose: bool = False):
    handlers = [logging.StreamHandler()]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--description", required=True, type=Path, help="Path to a description.md file")
    parser.add_argument("--output", default=None, type=Path, help="Write the JSON here instead of printing it")
    parser.add_argument("--work-id", default=None, help="Store the description and its parsed output under this work id")
    parser.add_argument("--storage-root", default=Path("./data"), type=Path, help="Storage root for works")
    parser.add_argument("--workers", default=None, type=int, help="Parse languages on this many threads")
    parser.add_argument("--log-file", default=None, type=Path, help="Also log to this file")
    parser.add_argument("--verbose", action="store_true", help="Log parsing details")
    args = parser.parse_args()

    setup_logging(args.log_file, args.verbose)

    if not args.description.exists():
        raise FileNotFoundError(f"Description not found: {args.description}")

    config = ParserConfig.from_env()
    if args.workers is not None:
        config = replace(config, max_workers=args.workers)
    engine = MarkdownParsingEngine(config)
    parsed = engine.parse_file(args.description)

    if args.work_id:
        storage = LocalWorkStorage(StoragePaths(args.storage_root))
        storage.write_description(args.work_id, args.description.read_text(encoding="utf-8"))
        output_path = storage.write_parsed_output(args.work_id, parsed)
        print(f"Parsed output written to {output_path}")
    else:
        rendered = json.dumps(parsed.to_dict(), ensure_ascii=False, indent=2, default=str)
        if args.output:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(rendered, encoding="utf-8")
            print(f"Parsed output written to {args.output}")
        else:
            print(rendered)

    for language, issues in parsed.issues.items():
        for issue in issues:
            print(f"[{language}] {issue.message}: {issue.node}")


if __name__ == "__main__":
    main()
