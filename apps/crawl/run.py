#!/usr/bin/env python3
"""Command-line entry point for the crawl workflow."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv

from apps.crawl.config import CrawlConfig, load_config
from crawler_search import GoogleSearch, GoogleSearchConfig, ResultsHarvester
from crawler_store import RecordStore

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')


def harvest(cfg: CrawlConfig) -> int:
    if not cfg.queries:
        print("No queries configured")
        return 1

    search = GoogleSearch(GoogleSearchConfig(cse_id=cfg.cse_id, options=cfg.search_options))
    harvester = ResultsHarvester(search, RecordStore(cfg.storage_root))

    for spec in cfg.queries:
        name = harvester.harvest(spec.text, name=spec.name, options=spec.options)
        print(f"{spec.text} -> {name}")
    return 0


def list_records(cfg: CrawlConfig, prefix: str) -> int:
    records = RecordStore(cfg.storage_root).get_all(prefix)
    if not records:
        print(f"No records under '{prefix}'")
        return 0
    for key, name in records.items():
        print(f"{key}\t{name}")
    return 0


def show_record(cfg: CrawlConfig, name: str) -> int:
    record = RecordStore(cfg.storage_root).get(name)
    if record is None:
        print(f"Record not found: {name}")
        return 1
    print(yaml.safe_dump(record, default_flow_style=False, allow_unicode=True, sort_keys=False))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Crawl search results into a record store")
    sub = parser.add_subparsers(dest="command", required=True)

    p_harvest = sub.add_parser("harvest", help="Run configured queries and store their results")
    p_harvest.add_argument("config", type=str, help="Path to YAML config")

    p_list = sub.add_parser("list", help="List stored records")
    p_list.add_argument("config", type=str, help="Path to YAML config")
    p_list.add_argument("prefix", nargs="?", default="results/", help="Logical path to list")

    p_show = sub.add_parser("show", help="Print a stored record")
    p_show.add_argument("config", type=str, help="Path to YAML config")
    p_show.add_argument("name", type=str, help="Logical record name")

    args = parser.parse_args(argv)
    cfg = load_config(Path(args.config))

    if args.command == "harvest":
        return harvest(cfg)
    if args.command == "list":
        return list_records(cfg, args.prefix)
    return show_record(cfg, args.name)


if __name__ == "__main__":
    sys.exit(main())
