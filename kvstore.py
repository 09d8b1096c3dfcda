"""Production entry point.

Run with `python kvstore.py` or `uvicorn kvstore:app --port 3000`.
Settings come from `config/kvstore.yml` (or the file named by
`KVSTORE_CONFIG`); --host/--port override them.
"""
import argparse
import sys
from typing import Iterable, Optional

from kvstore_lib.config.config import load_config
from kvstore_lib.main import create_app

config = load_config()
app = create_app(config)


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Namespaced key-value store over HTTP")
    p.add_argument("--host", default=config.host, help="Interface to bind (default: %(default)s)")
    p.add_argument("--port", type=int, default=config.port, help="Port to listen on (default: %(default)s)")
    return p.parse_args(list(argv) if argv is not None else None)


if __name__ == "__main__":
    import uvicorn
    args = parse_args(sys.argv[1:])
    uvicorn.run(app, host=args.host, port=args.port)
