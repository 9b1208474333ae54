"""starledger.cli

Command line interface entry point for starledger.

Design constraints:
- argparse-based.
- Lazy imports: do not import the web stack at parse time.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

EPILOG = "Every block remembers the one before it."


@dataclass(frozen=True)
class CliContext:
    repo_root: Path


def _repo_root_from_cwd() -> Path:
    return Path.cwd()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="starledger",
        description="Star registry on a hash-linked chain.",
        epilog=EPILOG,
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit.",
    )

    sub = parser.add_subparsers(dest="command")

    p_api = sub.add_parser("api", help="Start FastAPI server")
    p_api.add_argument("--host", default=None)
    p_api.add_argument("--port", type=int, default=None)

    sub.add_parser("status", help="Print configuration and a genesis self-check")

    p_challenge = sub.add_parser("challenge", help="Print an ownership challenge for an address")
    p_challenge.add_argument("address")

    return parser


def _print_version() -> None:
    from starledger import __version__

    print(f"starledger v{__version__}")


def _load_config(repo_root: Path):
    from starledger.core.config import Config

    cfg_path = repo_root / "config" / "default.yaml"
    user_path = repo_root / "config" / "user.yaml"
    if user_path.exists() or cfg_path.exists():
        return Config.from_repo_defaults(repo_root)
    return Config()


def _cmd_api(ctx: CliContext, args: argparse.Namespace) -> int:
    config = _load_config(ctx.repo_root)

    host = args.host or config.api.host
    port = args.port or config.api.port

    import uvicorn

    from api.main import create_app

    uvicorn.run(create_app(config), host=host, port=port, reload=False)
    return 0


def _cmd_status(ctx: CliContext, args: argparse.Namespace) -> int:
    from starledger.core.exceptions import ConfigError
    from starledger.registry import StarRegistry

    try:
        config = _load_config(ctx.repo_root)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    registry = StarRegistry.from_config(config)
    errors = registry.validate_chain()
    genesis = registry.get_block_by_height(0)

    print("starledger status")
    print(f"- repo_root: {ctx.repo_root}")
    print(f"- freshness window: {config.registry.freshness_window_seconds}s")
    print(f"- challenge suffix: {config.registry.challenge_suffix}")
    print(f"- signature scheme: {config.registry.signature_scheme}")
    print(f"- api: {config.api.host}:{config.api.port}")
    print(f"- chain height: {registry.current_height()}")
    print(f"- genesis hash: {genesis.hash if genesis else '-'}")
    print(f"- chain valid: {not errors}")
    for err in errors:
        print(f"  {err.message}")
    return 0 if not errors else 1


def _cmd_challenge(ctx: CliContext, args: argparse.Namespace) -> int:
    from starledger.ownership.challenge import issue_challenge

    config = _load_config(ctx.repo_root)
    print(issue_challenge(args.address, suffix=config.registry.challenge_suffix))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        _print_version()
        return 0

    if not args.command:
        parser.print_help()
        return 2

    ctx = CliContext(repo_root=_repo_root_from_cwd())

    dispatch: dict[str, Callable[[CliContext, argparse.Namespace], int]] = {
        "api": _cmd_api,
        "status": _cmd_status,
        "challenge": _cmd_challenge,
    }

    fn = dispatch.get(str(args.command))
    if fn is None:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 2

    return int(fn(ctx, args))


if __name__ == "__main__":
    raise SystemExit(main())
