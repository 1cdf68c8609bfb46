import argparse
import json
import os
import sys

import requests

# Ensure project root is on sys.path when the script is run directly
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from microcms_blog.clients.microcms_client import get_blog_post
from microcms_blog.config import load_config


def get_microcms_post_content(cfg, content_id, save_file=False):
    """
    Fetches a microCMS blog post and optionally saves it to a file.

    Args:
        cfg (dict): The ``microcms`` configuration section.
        content_id (str): The content ID of the post to fetch.
        save_file (bool): If True, saves the post to a JSON file in
                          data/posts/. Otherwise, prints to stdout.
    """
    try:
        post = get_blog_post(cfg, content_id)
    except requests.exceptions.RequestException as e:
        print(f"An error occurred: {e}")
        return None

    post_object = post.model_dump(mode="json", by_alias=True, exclude_none=True)

    if save_file:
        output_dir = os.path.join("data", "posts")
        os.makedirs(output_dir, exist_ok=True)
        output_path = os.path.join(output_dir, f"{content_id}.json")
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(post_object, f, ensure_ascii=False, indent=4)
        print(f"Successfully saved post content to {output_path}")
    else:
        print(json.dumps(post_object, ensure_ascii=False, indent=4))
    return post_object


def main():
    """Main function to parse arguments and fetch post content."""
    parser = argparse.ArgumentParser(description="Fetch a microCMS blog post by its content ID.")
    parser.add_argument("content_id", help="The content ID of the post to fetch.")
    parser.add_argument(
        "--save-file",
        action="store_true",
        help="Save the post content to a JSON file in data/posts/."
    )
    parser.add_argument("--config", default=os.path.join("config", "content_config.json"))
    args = parser.parse_args()

    config = load_config(config_file=args.config)
    if not config["microcms"]["api_key"]:
        print("Could not find the microCMS API key in the configuration or MICROCMS_API_KEY")
        return 1

    post = get_microcms_post_content(config["microcms"], args.content_id, args.save_file)
    return 0 if post is not None else 1


if __name__ == "__main__":
    raise SystemExit(main())
