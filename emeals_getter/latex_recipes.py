"""Build LaTeX fragments and documents from parsed recipe pages."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

import requests
from bs4 import BeautifulSoup

DOCUMENT_BEGIN = r"""
\documentclass[12pt]{article}

\usepackage{fullpage}
\usepackage{fontspec}
\usepackage{multicol}
\usepackage{graphicx}

\setmainfont{Andika}

\pagestyle{empty}

\begin{document}
"""

DOCUMENT_END = r"""
\end{document}
"""

_REQUEST_TIMEOUT = 30


def _date_dir() -> Path:
    """Create and return today's output directory."""
    directory = Path(datetime.now().strftime("%Y%m%d"))
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def _image_url(recipe: BeautifulSoup) -> str | None:
    """Return the recipe image URL, if the page has one."""
    img = recipe.select_one(".recipe_image img")
    if img is None:
        return None
    src = img.get("src")
    return src if isinstance(src, str) else None


def _texts(recipe: BeautifulSoup, selector: str) -> list[str]:
    return [element.get_text() for element in recipe.select(selector)]


def _section(heading: str, ingredients: Iterable[str], instructions: Iterable[str]) -> list[str]:
    parts = [f"{{\\noindent\\large {heading}Ingredients}}\n", "\\begin{itemize}\n"]
    parts.extend(f"    \\item[] {item}\n" for item in ingredients)
    parts.append("\\end{itemize}\n")
    parts.append("\\bigskip\n")
    parts.append(f"{{\\noindent\\large {heading}Instructions}}\n")
    parts.append("\\begin{enumerate}\n")
    parts.extend(f"    \\item {step}\n" for step in instructions)
    parts.append("\\end{enumerate}\n")
    return parts


def get_recipe(recipe: BeautifulSoup) -> str:
    """Return the LaTeX fragment for a recipe page, downloading its image if any.

    Raises ValueError if the page has no title.
    """
    date_dir = _date_dir()

    title_element = recipe.select_one(".mainTitle")
    if title_element is None:
        raise ValueError("Unable to find title.")
    title = title_element.get_text()

    parts: list[str] = []

    url = _image_url(recipe)
    if url is None:
        print(f'WARNING: No image for recipe: "{title}"', file=sys.stderr)
    else:
        image_filename = url.split("/")[-1]
        content = requests.get(url, timeout=_REQUEST_TIMEOUT).content
        (date_dir / image_filename).write_bytes(content)
        parts.append(
            "\\begin{center}\\includegraphics[height=3in]"
            f"{{{image_filename}}}\\end{{center}}\n\n"
        )

    parts.append(f"{{\\noindent\\Large {title}}}\n\n")
    parts.append("\\medskip\n")

    subtitle = recipe.select_one(".sideTitle")
    if subtitle is not None:
        parts.append(f"{{\\noindent\\large {subtitle.get_text()}}}\n\n")
        parts.append("\\medskip\n")

    parts.extend(f"{time} " for time in _texts(recipe, ".times time"))
    parts.append("\n\n\\bigskip\n")

    parts.extend(
        _section(
            "",
            _texts(recipe, ".mainInformation .ingredients li"),
            _texts(recipe, ".mainInformation .instructions li"),
        )
    )
    parts.append("\\bigskip\n")

    if subtitle is not None:
        parts.extend(
            _section(
                "Side Dish ",
                _texts(recipe, ".side_dish_section .ingredients li"),
                _texts(recipe, ".side_dish_section .instructions li"),
            )
        )

    return "".join(parts)


def write_recipes(recipes: Iterable[str]) -> None:
    """Write the recipe fragments into today's recipes.tex document."""
    path = _date_dir() / "recipes.tex"
    with path.open("w", encoding="utf-8") as out:
        out.write(DOCUMENT_BEGIN)
        for recipe in recipes:
            out.write(f"{recipe}\n\\newpage\n")
        out.write(DOCUMENT_END)