"""
Entry point for the microCMS blog content export.
"""

import argparse

from microcms_blog.content_tool import BlogContentTool
from microcms_blog.config import DEFAULT_CONFIG_FILE
from microcms_blog.utils.pre_flight_checks import PreFlightCheckError


def main():
    """
    Main function to export posts, tags and categories from microCMS.
    """
    parser = argparse.ArgumentParser(description="Export microCMS blog content as JSON for the static site.")
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE, help="Path to the JSON configuration file.")
    parser.add_argument("--output-dir", default=None, help="Overrides export.output_dir from the configuration.")
    parser.add_argument("--skip-checks", action="store_true", help="Do not run the pre-flight checks.")
    args = parser.parse_args()

    tool = BlogContentTool(config_file=args.config)
    if args.output_dir:
        tool.output_dir = args.output_dir
    tool.log_message("Starting microCMS content export.")

    if not args.skip_checks:
        try:
            tool.pre_flight()
        except PreFlightCheckError as e:
            tool.log_message(str(e), level="ERROR")
            return 1

    written = tool.export_all()
    for name, path in written.items():
        tool.log_message(f"Wrote {name} to {path}")

    tool.log_message("Export finished.")
    return 0 if len(written) == 3 else 1


if __name__ == "__main__":
    raise SystemExit(main())
