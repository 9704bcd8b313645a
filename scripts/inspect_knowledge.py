#!/usr/bin/env python3
"""
Inspect a cultural knowledge document.

Parses the document the way the knowledge store does and reports what was
extracted: record counts per section, completeness errors and the first
record of each kind.

Usage:
    python scripts/inspect_knowledge.py [--source path-or-url] [--json]
"""
import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from configs import get_settings
from src.knowledge import DocumentReadError, KnowledgeDocumentParser, validate_completeness


def print_report(source: str, parsed, errors: list[str]):
    print(f"\n{'='*60}")
    print(f"📖 {source}")
    print(f"{'='*60}")

    print(f"\n📊 Records:")
    for section, count in parsed.counts().items():
        print(f"   {section:<14} {count}")

    if errors:
        print(f"\n⚠️  Incomplete ({len(errors)}), the store would use fallback data:")
        for error in errors:
            print(f"   • {error}")
    else:
        print(f"\n✅ Complete, the store would use this document")

    print(f"\n🔍 First records:")
    for section in ("terms", "dishes", "festivals", "mood_mappings"):
        records = getattr(parsed, section)
        if records:
            print(f"   {section}: {records[0].model_dump()}")
        else:
            print(f"   {section}: (none)")


def main():
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Inspect a cultural knowledge document")
    parser.add_argument(
        "--source",
        default=settings.knowledge_source,
        help="Document path or http(s) URL (default: configured knowledge source)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON"
    )
    args = parser.parse_args()

    try:
        parsed = KnowledgeDocumentParser().parse_source(
            args.source, timeout=settings.knowledge_fetch_timeout
        )
    except DocumentReadError as e:
        print(f"❌ {e}")
        sys.exit(1)

    errors = validate_completeness(parsed)

    if args.json:
        output = {
            "source": args.source,
            "counts": parsed.counts(),
            "errors": errors,
            "records": parsed.model_dump(),
        }
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print_report(args.source, parsed, errors)

    sys.exit(1 if errors else 0)


if __name__ == "__main__":
    main()
