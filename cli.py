from __future__ import annotations

import argparse
import json
import os
import sys

import uvicorn
from loguru import logger

from modelgraph.builder import scan_project
from modelgraph.config import get_settings
from modelgraph.errors import ScanRootNotFound
from modelgraph.logger import setup_logging
from modelgraph.summarize import summarize_graph, summarize_model


def cmd_analyze(args: argparse.Namespace) -> int:
	settings = get_settings()
	if args.workers is not None:
		settings = settings.model_copy(update={"max_workers": args.workers})

	root = os.path.abspath(args.path)
	try:
		graph = scan_project(root, settings)
	except ScanRootNotFound as e:
		logger.error(str(e))
		return 2

	payload = graph.to_payload().model_dump(by_alias=True)
	text = json.dumps(payload, indent=2)
	if args.output:
		with open(args.output, "w", encoding="utf-8") as fh:
			fh.write(text + "\n")
		logger.info(f"Wrote graph to {args.output}")
	else:
		print(text)

	if args.summary:
		summary = summarize_graph(graph, root)
		print(summary.overview, file=sys.stderr)
		if summary.message:
			print(summary.message, file=sys.stderr)
		for node_id in graph.node_ids():
			print(summarize_model(graph, node_id), file=sys.stderr)
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def main(argv=None) -> int:
	settings = get_settings()
	parser = argparse.ArgumentParser(prog="modelgraph")
	parser.add_argument("--log-level", default=settings.log_level)
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Scan a Laravel project and print the model graph JSON")
	pa.add_argument("path", help="Path to project root")
	pa.add_argument("-o", "--output", default=None, help="Write JSON to a file instead of stdout")
	pa.add_argument("--summary", action="store_true", help="Print a textual summary to stderr")
	pa.add_argument("--workers", type=int, default=None, help="Threads used to read files")
	pa.set_defaults(func=cmd_analyze)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default=settings.host)
	ps.add_argument("--port", type=int, default=settings.port)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	args = parser.parse_args(argv)
	setup_logging(args.log_level, settings.log_file)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
