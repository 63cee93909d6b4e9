# scripts/raw_fetch.py
from __future__ import annotations
import argparse
import json
from rlstats.api.client import RlStatsClient
from rlstats.config.env import configure_logging, load_config
from rlstats.errors import RlStatsError


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Raw RL Stats fetcher (no parsing).")
    ap.add_argument("--path", required=True, help="endpoint below the API root, e.g. 'data/playlists' or 'player'")
    ap.add_argument("--param", action="append", default=[], metavar="KEY=VALUE", help="query parameter, repeatable")
    args = ap.parse_args(argv)

    params = {}
    for item in args.param:
        key, sep, value = item.partition("=")
        if not sep:
            ap.error(f"--param expects KEY=VALUE, got '{item}'")
        params[key] = value

    try:
        cfg = load_config()
        configure_logging(cfg.log_level)
        data = RlStatsClient(cfg).fetch("/" + args.path.lstrip("/"), params or None)
    except RlStatsError as exc:
        print(f"Error: {exc}")
        return 1

    out = cfg.export_dir / "_debug" / f"{args.path.strip('/').replace('/', '_')}.json"
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"Saved: {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
