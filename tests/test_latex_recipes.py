from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from bs4 import BeautifulSoup

from emeals_getter.latex_recipes import get_recipe, write_recipes

IMAGE = (
    '<div class="recipe_image">'
    '<img src="https://images.example.com/pics/tacos.jpg"></div>'
)
TITLE = '<h1 class="mainTitle">Chicken Tacos</h1>'
SIDE_TITLE = '<h2 class="sideTitle">Corn Salad</h2>'
BODY = (
    '<div class="times"><time>Prep 10m</time><time>Cook 20m</time></div>'
    '<div class="mainInformation">'
    '<ul class="ingredients"><li>1 lb chicken</li><li>8 tortillas</li></ul>'
    '<ol class="instructions"><li>Cook chicken.</li><li>Fill tortillas.</li></ol>'
    "</div>"
    '<div class="side_dish_section">'
    '<ul class="ingredients"><li>2 ears corn</li></ul>'
    '<ol class="instructions"><li>Grill corn.</li></ol>'
    "</div>"
)


def _soup(*parts):
    return BeautifulSoup("<html><body>" + "".join(parts) + "</body></html>", "html.parser")


def _only_dir(root: Path) -> Path:
    dirs = [p for p in root.iterdir() if p.is_dir()]
    assert len(dirs) == 1
    return dirs[0]


@pytest.fixture(autouse=True)
def _in_tmp(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_missing_title_raises():
    with pytest.raises(ValueError, match="Unable to find title"):
        get_recipe(_soup(BODY))


def test_no_image_warns_and_starts_with_title(capsys):
    result = get_recipe(_soup(TITLE, BODY))
    assert result.startswith("{\\noindent\\Large Chicken Tacos}\n\n\\medskip\n")
    assert 'WARNING: No image for recipe: "Chicken Tacos"' in capsys.readouterr().err


def test_creates_dated_directory(tmp_path):
    result = get_recipe(_soup(TITLE, BODY))
    assert "Chicken Tacos" in result
    directory = _only_dir(tmp_path)
    assert directory.name.isdigit()
    assert len(directory.name) == 8


def test_times_are_emitted_in_order():
    result = get_recipe(_soup(TITLE, BODY))
    assert "Prep 10m Cook 20m \n\n\\bigskip\n" in result


def test_main_ingredients_and_instructions():
    result = get_recipe(_soup(TITLE, BODY))
    first = result.index("    \\item[] 1 lb chicken\n")
    second = result.index("    \\item[] 8 tortillas\n")
    assert first < second
    assert "    \\item Cook chicken.\n" in result
    assert "{\\noindent\\large Ingredients}\n\\begin{itemize}\n" in result
    assert "{\\noindent\\large Instructions}\n\\begin{enumerate}\n" in result


def test_side_dish_omitted_without_side_title():
    result = get_recipe(_soup(TITLE, BODY))
    assert "Side Dish" not in result
    assert "2 ears corn" not in result
    assert result.endswith("\\end{enumerate}\n\\bigskip\n")


def test_side_dish_included_with_side_title():
    result = get_recipe(_soup(TITLE, SIDE_TITLE, BODY))
    assert "{\\noindent\\large Corn Salad}\n\n\\medskip\n" in result
    assert "{\\noindent\\large Side Dish Ingredients}\n" in result
    assert "    \\item[] 2 ears corn\n" in result
    assert "    \\item Grill corn.\n" in result
    assert result.endswith("\\end{enumerate}\n")
    # The main section must not pick up side ingredients.
    main_part = result.split("Side Dish Ingredients")[0]
    assert "2 ears corn" not in main_part


def test_image_downloaded_and_included(tmp_path):
    response = MagicMock()
    response.content = b"imagebytes"
    with patch("requests.get", return_value=response) as fake_get:
        result = get_recipe(_soup(IMAGE, TITLE, BODY))
    assert fake_get.call_args[0][0] == "https://images.example.com/pics/tacos.jpg"
    assert result.startswith(
        "\\begin{center}\\includegraphics[height=3in]{tacos.jpg}\\end{center}\n\n"
    )
    assert (_only_dir(tmp_path) / "tacos.jpg").read_bytes() == b"imagebytes"


def test_write_recipes_document(tmp_path):
    result = write_recipes(["FIRST", "SECOND"])
    assert result is None
    text = (_only_dir(tmp_path) / "recipes.tex").read_text(encoding="utf-8")
    assert "\\documentclass[12pt]{article}" in text
    assert "\\begin{document}\n" in text
    assert text.endswith("\\end{document}\n")
    assert "FIRST\n\\newpage\nSECOND\n\\newpage\n" in text


def test_write_recipes_empty(tmp_path):
    result = write_recipes([])
    assert result is None
    text = (_only_dir(tmp_path) / "recipes.tex").read_text(encoding="utf-8")
    assert "\\newpage" not in text
    assert text.index("\\begin{document}") < text.index("\\end{document}")