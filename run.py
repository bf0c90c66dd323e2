#!/usr/bin/env python3
"""Entry point script for QueryLens MCP Server."""

import sys
import subprocess
import argparse


def main():
    """Main entry point with transport selection."""
    parser = argparse.ArgumentParser(
        description="QueryLens MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run with stdio transport (for desktop MCP clients)
  python run.py stdio

  # Run with SSE transport on default port
  python run.py sse

  # Run with SSE transport on custom port
  python run.py sse --port 3000

  # Run with debug logging
  LOG_LEVEL=DEBUG python run.py sse
        """
    )

    parser.add_argument(
        "transport",
        choices=["stdio", "sse"],
        help="Transport mode: stdio for CLI, sse for HTTP streaming"
    )

    parser.add_argument(
        "--port",
        type=int,
        default=3000,
        help="Port for SSE server (default: 3000)"
    )

    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host for SSE server (default: 0.0.0.0)"
    )

    parser.add_argument(
        "--config",
        help="Path to a YAML configuration file"
    )

    args = parser.parse_args()

    cmd = [sys.executable, "-m", "querylens.cli.mcp_server", "--transport", args.transport]

    if args.transport == "sse":
        cmd.extend(["--host", args.host, "--port", str(args.port)])

    if args.config:
        cmd.extend(["--config", args.config])

    # stdout belongs to the JSON-RPC stream in stdio mode
    print("Starting QueryLens MCP Server", file=sys.stderr)
    print(f"   Transport: {args.transport}", file=sys.stderr)

    if args.transport == "sse":
        print(f"   Server: http://{args.host}:{args.port}/sse", file=sys.stderr)

    try:
        subprocess.run(cmd)
    except KeyboardInterrupt:
        print("\nServer stopped", file=sys.stderr)
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
