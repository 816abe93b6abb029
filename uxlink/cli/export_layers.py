import argparse
import asyncio
import json
import logging
import sys

from uxlink.core.config import settings
from uxlink.core.errors import EmptySelection
from uxlink.models.messages import ClipboardPayload
from uxlink.services.serializer import extract_layers
from uxlink.services.snapshot import load_document_from_path

log = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Export selected layers of a document snapshot as structured JSON.")
    p.add_argument("--in", dest="in_path", required=True, help="Path to the document snapshot JSON")
    p.add_argument("--out", dest="out_path", default="layers.json", help="Output layers JSON")
    p.add_argument("--select", dest="select", default=None,
                   help="Comma-separated node ids (default: the snapshot's own selection)")
    p.add_argument("--isolate-failures", dest="isolate_failures", action="store_true",
                   default=settings.isolate_node_failures,
                   help="Mark failing nodes with an error instead of aborting")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    selection = [s.strip() for s in args.select.split(",") if s.strip()] if args.select else None
    host = load_document_from_path(args.in_path, selection)
    log.debug("loaded %s, selection=%s", args.in_path, [n.id for n in host.selection])

    try:
        layers = asyncio.run(extract_layers(host, isolate_failures=args.isolate_failures))
    except EmptySelection as e:
        print(str(e), file=sys.stderr)
        return 1

    payload = ClipboardPayload(layers=layers).model_dump(by_alias=True)
    with open(args.out_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)

    print(f"Layers → {args.out_path} ({len(layers)} root(s))")
    return 0


if __name__ == "__main__":
    sys.exit(main())
