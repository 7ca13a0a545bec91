import argparse
import logging
import sys

import requests

import config
from services.ads import generate_ads, translate_ads
from services.errors import AdEngineError, AdParseError, InsufficientAdsError
from services.history import HistoryEntry, JsonFileHistoryStore, make_label
from services.models import AdItem, FreshRequest, VariantRequest


def print_ads(ads):
    for i, ad in enumerate(ads, 1):
        print(f"\n--- Ad {i} ---")
        print(ad.as_text())


def cmd_generate(args, store):
    gen_request = FreshRequest(url=args.url, language=args.language, custom_prompt=args.prompt)
    print("\nGenerating ads, please wait... ☕")
    result = generate_ads(gen_request)
    if result.heading:
        print("Page heading:", result.heading)
    print_ads(result.ads)
    store.append(HistoryEntry(
        label=make_label(url=args.url),
        ads=result.ads,
        url=args.url,
        custom_prompt=args.prompt,
    ))
    return 0


def cmd_vary(args, store):
    base = AdItem(title=args.title, description=args.description, cta=args.cta)
    print("\nGenerating variations, please wait... ☕")
    result = generate_ads(VariantRequest(base=base, language=args.language))
    print_ads(result.ads)
    store.append(HistoryEntry(label=make_label(variant_of=base), ads=result.ads))
    return 0


def cmd_translate(args, store):
    entries = store.load()
    if not entries:
        print("History is empty, nothing to translate.")
        return 1
    latest = entries[0]
    print(f"\nTranslating '{latest.label}' to {args.language}...")
    ads = translate_ads(latest.ads, args.language)
    print_ads(ads)
    store.append(HistoryEntry(label=make_label(target_language=args.language), ads=ads))
    return 0


def cmd_history(args, store):
    if args.clear:
        store.clear()
        print("History cleared.")
        return 0
    entries = store.load()
    if not entries:
        print("No history yet.")
    for entry in entries:
        print(f"{entry.id}  {entry.label}  ({len(entry.ads)} ads)")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Generate Facebook ad copy from a product page.")
    parser.add_argument("--history-file", default=str(config.HISTORY_PATH), help="Path to the local history JSON file")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate 3 ads from a product URL")
    gen.add_argument("url", help="Product page URL")
    gen.add_argument("--language", default=config.DEFAULT_LANGUAGE, choices=config.LANGUAGES, help="Target language")
    gen.add_argument("--prompt", help="Custom instruction prepended to the style guidelines")
    gen.set_defaults(func=cmd_generate)

    vary = sub.add_parser("vary", help="Generate 3 variations of an existing ad")
    vary.add_argument("--title", required=True)
    vary.add_argument("--description", required=True)
    vary.add_argument("--cta", required=True)
    vary.add_argument("--language", default=config.DEFAULT_LANGUAGE, choices=config.LANGUAGES, help="Target language")
    vary.set_defaults(func=cmd_vary)

    trans = sub.add_parser("translate", help="Translate the latest history entry")
    trans.add_argument("--language", required=True, choices=config.LANGUAGES, help="Target language")
    trans.set_defaults(func=cmd_translate)

    hist = sub.add_parser("history", help="List or clear local history")
    hist.add_argument("--clear", action="store_true", help="Remove all history entries")
    hist.set_defaults(func=cmd_history)

    return parser


def main(argv=None):
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)
    store = JsonFileHistoryStore(args.history_file, limit=config.HISTORY_LIMIT)

    try:
        return args.func(args, store)
    except AdParseError as e:
        print(f"\n❌ {e}\nRaw response:\n{e.raw}")
    except InsufficientAdsError as e:
        print(f"\n❌ {e} Recovered {len(e.items)}:")
        print_ads(e.items)
    except AdEngineError as e:
        print(f"\n❌ {e}")
    except requests.exceptions.RequestException as e:
        print(f"\n❌ Failed to load page: {e}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
