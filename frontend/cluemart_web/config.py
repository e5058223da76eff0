# frontend/cluemart_web/config.py
# Centralises the backend endpoints and the launch moment shown by the countdown.

import argparse
import datetime

DEFAULT_LAUNCH_AT = "2025-12-25T00:01:00+13:00"  # Auckland (NZDT)


def parse_launch_at(value: str) -> datetime.datetime:
    """argparse type for --launch-at: an ISO-8601 moment that must carry a UTC offset."""
    try:
        moment = datetime.datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 date-time: {value!r}")
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise argparse.ArgumentTypeError(f"missing UTC offset, e.g. {DEFAULT_LAUNCH_AT}: {value!r}")
    return moment


class AppConfig:
    """
    Parses command-line arguments and constructs all necessary API endpoint URLs.
    """
    def __init__(self, argv=None):
        parser = argparse.ArgumentParser(description="ClueMart Frontend Launcher", allow_abbrev=False)
        parser.add_argument(
            "--port",
            type=int,
            default=10101,
            help="Port to run the frontend server on (default: 10101)"
        )
        parser.add_argument(
            "--bnport",
            type=int,
            default=8421,
            help="Port of the backend server (default: 8421)"
        )
        parser.add_argument(
            "--bnserver",
            type=str,
            default="http://127.0.0.1",
            help="Backend server address (default: http://127.0.0.1)"
        )
        parser.add_argument(
            "--launch-at",
            type=parse_launch_at,
            default=parse_launch_at(DEFAULT_LAUNCH_AT),
            help=f"ISO-8601 moment the beta opens (default: {DEFAULT_LAUNCH_AT})"
        )

        # parse_known_args 避免 Gradio reload 或 pytest 传入的额外参数导致出错
        args, _ = parser.parse_known_args(argv)

        self.run_port = args.port
        self.launch_at = args.launch_at
        backend_base_url = f"{args.bnserver}:{args.bnport}"

        # --- API Endpoints ---
        self.API_BASE_URL = f"{backend_base_url}/api"
        self.ROOT_URL = backend_base_url
        self.SUBSCRIBE_URL = f"{self.API_BASE_URL}/subscribe"


# Create a single, globally accessible configuration instance.
config = AppConfig()
