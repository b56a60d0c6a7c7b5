"""Fetch recipe pages listed in a file and write a grocery list and LaTeX recipes."""

from __future__ import annotations

import argparse
import sys
import threading
from collections.abc import Iterable, Sequence
from datetime import datetime
from pathlib import Path

import requests
from bs4 import BeautifulSoup

from emeals_getter.latex_recipes import get_recipe, write_recipes

_USER_AGENT = "Mozilla/5.0"
_REQUEST_TIMEOUT = 30


def _date_dir() -> Path:
    directory = Path(datetime.now().strftime("%Y%m%d"))
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def read_file(filename: str | Path) -> list[str]:
    """Return the lines of the file, one URL per line."""
    try:
        handle = open(filename, encoding="utf-8")
    except OSError as error:
        raise OSError(f"Could not open input file: {error}") from error
    with handle:
        try:
            contents = handle.read()
        except (OSError, UnicodeDecodeError) as error:
            raise OSError(f"Could not read input file: {error}") from error

    lines = contents.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def process_url(
    url: str,
    ingredients: list[str],
    recipes: list[str],
    lock: threading.Lock,
) -> None:
    """Fetch one recipe page, adding its ingredients and LaTeX fragment to the lists."""
    response = requests.get(
        url, headers={"User-Agent": _USER_AGENT}, timeout=_REQUEST_TIMEOUT
    )
    document = BeautifulSoup(response.content, "html.parser")

    found = [li.get_text() for li in document.select(".ingredients li")]
    # Added in one go so that ingredients of different recipes never interleave.
    with lock:
        ingredients.extend(found)

    fragment = get_recipe(document)
    with lock:
        recipes.append(fragment)


def write_ingredients(ingredients: Iterable[str]) -> None:
    """Write the ingredients, one per line, to today's groceries.txt."""
    path = _date_dir() / "groceries.txt"
    with path.open("w", encoding="utf-8") as out:
        for ingredient in ingredients:
            out.write(f"{ingredient}\n")


def get_urls(urls: Iterable[str]) -> None:
    """Process every URL in its own thread, then write the output files."""
    ingredients: list[str] = []
    recipes: list[str] = []
    lock = threading.Lock()

    def worker(url: str) -> None:
        try:
            process_url(url, ingredients, recipes, lock)
        except Exception:
            print(f"Error processing URL: {url}", file=sys.stderr)

    threads = [threading.Thread(target=worker, args=(url,)) for url in urls]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    write_ingredients(ingredients)
    write_recipes(recipes)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line program and return its exit status."""
    parser = argparse.ArgumentParser(
        description="Parse a list of eMeals URLs and generate recipes from them."
    )
    parser.add_argument("file", type=Path, help="the file containing the list of URLs")
    args = parser.parse_args(argv)

    try:
        urls = read_file(args.file)
        get_urls(urls)
    except OSError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())