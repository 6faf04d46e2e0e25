"""
Resolve the run mode and bind address, then build mode-aware settings.

Usage:
    from blog_graph.core.init_settings import settings

    python -m blog_graph.main --mode prod --host 0.0.0.0
"""
import os
import sys
import argparse

from blog_graph.core.config import get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Blog GraphQL API Server")
    parser.add_argument("--mode", choices=["dev", "prod"], default="dev")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")))
    return parser


def resolve_args(argv: list[str]) -> argparse.Namespace:
    """Parse ``argv`` (including the program name).

    Under pytest or uvicorn the command line belongs to the host program,
    so the mode comes from ``APP_MODE`` instead.
    """
    program = argv[0] if argv else ""
    if "pytest" in program or "uvicorn" in program:
        return build_parser().parse_args(["--mode", os.getenv("APP_MODE", "dev")])
    args, _ = build_parser().parse_known_args(argv[1:])
    return args


args = resolve_args(sys.argv)
settings = get_settings(args.mode)

__all__ = ["settings", "args"]
