"""``cargo-pack`` command line.

Prints the files a package asks to be packed, one per line::

    cargo-pack package=my-crate

With ``path=...`` the metadata at that dotted key is printed as JSON instead::

    cargo-pack path=package.metadata.pack.docker
"""

from __future__ import annotations

import copy
import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

import chz

from .config import CARGO_PACK_CONFIG
from .core import CargoPack
from .errors import CargoPackError
from .runtime.logging import configure_logging


@chz.chz
class PackArgs:
    package: str | None = chz.field(default=None, doc="Workspace member to read.")
    path: str | None = chz.field(
        default=None, doc="Dotted metadata key to print as JSON."
    )
    cwd: str | None = chz.field(
        default=None, doc="Directory to start workspace discovery from."
    )
    verbose: bool = chz.field(default=False, doc="Log pipeline steps.")


def run(args: PackArgs, *, out: TextIO | None = None, err: TextIO | None = None) -> int:
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    config = copy.copy(CARGO_PACK_CONFIG)
    if args.cwd is not None:
        config.cwd_override = Path(args.cwd)
    configure_logging(logging.DEBUG if args.verbose else config.log_level)

    try:
        pack = CargoPack(args.package, config=config)
        if args.path is None:
            for name in pack.files():
                print(name, file=out)
        else:
            value = pack.decode_from_manifest(Any, args.path)
            print(json.dumps(value, indent=2, sort_keys=True, default=str), file=out)
    except CargoPackError as exc:
        print(f"error: {exc}", file=err)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = chz.entrypoint(PackArgs, argv=argv)
    return run(args)


__all__ = ["PackArgs", "main", "run"]
